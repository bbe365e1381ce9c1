# -*- coding: utf-8 -*-
"""
JSON Asset Store

Persists localized assets as one *.asset.json file each inside a directory:

    {
        "id": "3f2a...",
        "name": "Greeting",
        "value_type": "text",
        "locale_items": [{"language": "English", "value": "Hello"}, ...]
    }

Files are always rewritten whole and atomically (temp file + os.replace).
"""

import json
import os
import uuid
from pathlib import Path
from typing import Dict, List, Optional

import localeforge_config as config
from interfaces.i_asset_store import IAssetStore, StructuralChange
from models.localized_asset import LocaleItem, LocalizedAsset
from localeforge_enums import Language, ValueType
from localeforge_exceptions import PersistenceFailure
from localeforge_logger import get_logger

logger = get_logger("core.json_asset_store")


def asset_to_dict(asset: LocalizedAsset) -> dict:
    return {
        "id": asset.id,
        "name": asset.name,
        "value_type": asset.value_type.value,
        "locale_items": [
            {"language": item.language.value, "value": item.value}
            for item in asset.locale_items
        ],
    }


def asset_from_dict(data: dict, fallback_id: str) -> LocalizedAsset:
    """
    Build an asset from its JSON form.

    Raises:
        ValueError: if the data is not a valid asset
    """
    if not isinstance(data, dict):
        raise ValueError("asset data is not a mapping")

    value_type = ValueType(data.get("value_type", ValueType.TEXT.value))
    raw_items = data.get("locale_items") or []
    if not isinstance(raw_items, list):
        raise ValueError("'locale_items' is not a list")

    items = []
    for raw in raw_items:
        if not isinstance(raw, dict):
            raise ValueError("locale item is not a mapping")
        items.append(LocaleItem(language=Language.parse(raw.get("language", "")),
                                value=str(raw.get("value") or "")))

    asset_id = str(data.get("id") or fallback_id)
    name = str(data.get("name") or fallback_id)
    return LocalizedAsset(asset_id, name, value_type, items)


class JsonAssetStore(IAssetStore):
    """IAssetStore over a directory of JSON files."""

    def __init__(self, assets_dir):
        self._dir = Path(assets_dir)
        self._paths: Dict[str, Path] = {}
        self._loaded: Dict[str, LocalizedAsset] = {}
        self._dirty: Dict[str, LocalizedAsset] = {}
        self._mtimes: Dict[Path, int] = {}

    @property
    def assets_dir(self) -> Path:
        return self._dir

    @property
    def dirty_assets(self) -> List[LocalizedAsset]:
        return list(self._dirty.values())

    def path_of(self, asset: LocalizedAsset) -> Optional[Path]:
        return self._paths.get(asset.id)

    # =========================================================================
    # IAssetStore
    # =========================================================================

    def load_all(self) -> List[LocalizedAsset]:
        """
        Scan the directory and build every asset.

        A file that has not changed since it was last read or written keeps
        its existing asset instance, and so does an asset with unsaved
        in-memory changes. Everything else is parsed again.
        """
        if not self._dir.is_dir():
            logger.info(f"Assets directory does not exist yet: {self._dir}")
            self._paths.clear()
            self._loaded.clear()
            self._mtimes.clear()
            self._dirty.clear()
            return []

        previous_by_path = {path: self._loaded.get(asset_id) for asset_id, path in self._paths.items()}
        paths: Dict[str, Path] = {}
        loaded: Dict[str, LocalizedAsset] = {}
        mtimes: Dict[Path, int] = {}

        for path in sorted(self._dir.glob(f"*{config.ASSET_FILE_SUFFIX}")):
            fallback_id = path.name[:-len(config.ASSET_FILE_SUFFIX)]
            try:
                mtime = path.stat().st_mtime_ns
                previous = previous_by_path.get(path)
                if previous is not None and (previous.dirty or self._mtimes.get(path) == mtime):
                    asset = previous
                else:
                    with path.open('r', encoding='utf-8') as f:
                        asset = asset_from_dict(json.load(f), fallback_id)
            except (OSError, json.JSONDecodeError, ValueError) as e:
                logger.warning(f"Skipping unreadable asset file {path.name}: {e}")
                continue

            if asset.id in loaded:
                logger.warning(f"Duplicate asset id '{asset.id}' in {path.name}; skipped")
                continue

            paths[asset.id] = path
            loaded[asset.id] = asset
            mtimes[path] = mtime

        self._paths = paths
        self._loaded = loaded
        self._mtimes = mtimes
        # Dirty assets whose file disappeared are dropped
        self._dirty = {k: v for k, v in self._dirty.items() if loaded.get(k) is v}
        logger.debug(f"Loaded {len(loaded)} assets from {self._dir}")
        return list(loaded.values())

    def mark_dirty(self, asset: LocalizedAsset) -> None:
        asset.dirty = True
        self._dirty[asset.id] = asset

    def apply_structural_change(self, asset: LocalizedAsset, change: StructuralChange) -> bool:
        try:
            self._write(asset)
        except PersistenceFailure as e:
            logger.error(f"{change.kind.value} could not be persisted: {e}")
            return False
        return True

    def delete_asset(self, asset: LocalizedAsset) -> bool:
        path = self._paths.get(asset.id)
        if path is None:
            logger.warning(f"Asset '{asset.name}' has no file to delete")
            return False
        try:
            path.unlink()
        except OSError as e:
            logger.error(f"Could not delete {path}: {e}")
            return False
        self._mtimes.pop(path, None)
        self._paths.pop(asset.id, None)
        self._loaded.pop(asset.id, None)
        self._dirty.pop(asset.id, None)
        return True

    def save_dirty(self) -> int:
        """
        Write every dirty asset.

        Raises:
            PersistenceFailure: if at least one asset could not be written
                (the others are still saved)
        """
        saved = 0
        failed = []
        for asset in list(self._dirty.values()):
            try:
                self._write(asset)
                saved += 1
            except PersistenceFailure as e:
                logger.error(str(e))
                failed.append(asset.name)
        if failed:
            raise PersistenceFailure(f"{len(failed)} asset(s) could not be saved: {', '.join(failed)}")
        logger.info(f"Saved {saved} asset(s)")
        return saved

    # =========================================================================
    # CREATION
    # =========================================================================

    def create_asset(self, name: str, value_type: ValueType = ValueType.TEXT,
                     default_language: Language = Language.ENGLISH) -> LocalizedAsset:
        """Create and write a new asset with a single empty default locale."""
        asset = LocalizedAsset(uuid.uuid4().hex, name, value_type, [LocaleItem(language=default_language)])
        self._write(asset)
        return asset

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _path_for_new(self, asset: LocalizedAsset) -> Path:
        stem = "".join(c if c.isalnum() or c in "-_" else "_" for c in asset.name).strip("_") or "asset"
        path = self._dir / f"{stem}{config.ASSET_FILE_SUFFIX}"
        counter = 1
        while path.exists():
            path = self._dir / f"{stem}_{counter}{config.ASSET_FILE_SUFFIX}"
            counter += 1
        return path

    def _write(self, asset: LocalizedAsset) -> None:
        path = self._paths.get(asset.id)
        tmp_path = None
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            if path is None:
                path = self._path_for_new(asset)
            tmp_path = path.with_name(path.name + ".tmp")
            with tmp_path.open('w', encoding='utf-8') as f:
                json.dump(asset_to_dict(asset), f, indent=4, ensure_ascii=False)
            os.replace(tmp_path, path)
            self._mtimes[path] = path.stat().st_mtime_ns
        except OSError as e:
            if tmp_path is not None:
                self._discard(tmp_path)
            raise PersistenceFailure(f"Could not write asset '{asset.name}': {e}",
                                     asset_id=asset.id, file_path=str(path)) from e

        self._paths[asset.id] = path
        self._loaded[asset.id] = asset
        self._dirty.pop(asset.id, None)
        asset.dirty = False

    @staticmethod
    def _discard(tmp_path: Path) -> None:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove temporary file {tmp_path.name}: {e}")
