# -*- coding: utf-8 -*-
"""
LocaleForge Asset Registry

Lazily populated cache of every localized asset in the project.
Invalidated wholesale by an external "project changed" signal; the next
read rescans the store. There is no incremental diffing.
"""

from typing import Dict, List, Optional

from interfaces.i_asset_store import IAssetStore
from models.localized_asset import LocalizedAsset
from localeforge_logger import get_logger

logger = get_logger("models.asset_registry")


def _display_order(asset: LocalizedAsset):
    return asset.name.lower(), asset.id


class AssetRegistry:
    """Source of truth for the tree projection."""

    def __init__(self, store: IAssetStore):
        self._store = store
        self._assets: List[LocalizedAsset] = []
        self._by_id: Dict[str, LocalizedAsset] = {}
        self._stale = True

    @property
    def is_stale(self) -> bool:
        return self._stale

    def all(self) -> List[LocalizedAsset]:
        """
        Return every asset ordered by its current display name, rescanning
        the store first if the cache is stale.
        """
        if self._stale:
            self._rescan()
        return sorted(self._assets, key=_display_order)

    def invalidate(self) -> None:
        """Mark the cache stale. The next all() call rescans."""
        if not self._stale:
            logger.debug("Asset registry invalidated")
        self._stale = True

    def find(self, asset_id: str) -> Optional[LocalizedAsset]:
        if self._stale:
            self._rescan()
        return self._by_id.get(asset_id)

    def contains(self, asset: LocalizedAsset) -> bool:
        """True if this exact asset instance is the registered one for its id."""
        return self.find(asset.id) is asset

    def _rescan(self) -> None:
        assets = list(self._store.load_all())
        self._assets = assets
        self._by_id = {a.id: a for a in assets}
        self._stale = False
        logger.info(f"Asset registry rescanned: {len(assets)} assets")
