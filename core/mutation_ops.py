# -*- coding: utf-8 -*-
"""
LocaleForge Mutation Operations

The structural operations on a localized asset (add locale, remove locale,
promote to default, rename, change language) plus manual value edits and
asset deletion.

Every structural operation is all-or-nothing: the in-memory change is
applied, handed to the asset store, and rolled back if the store rejects
it. Observers of 'structure_changed' are notified synchronously after each
successful change so the projection can be rebuilt before the next read.
"""

from typing import Callable, Dict, List

from interfaces.i_asset_store import IAssetStore, StructuralChange
from models.asset_registry import AssetRegistry
from models.localized_asset import LocaleItem, LocalizedAsset
from localeforge_enums import ChangeKind, Language, ValueType
from localeforge_exceptions import InvariantViolation, NotFoundError, PersistenceFailure
from localeforge_logger import get_logger

logger = get_logger("core.mutation_ops")


class MutationOps:
    """
    Applies mutations to registered localized assets.

    Events:
        structure_changed(asset, change): after a structural change is persisted
        value_changed(asset, item): after a manual value edit
        asset_created(asset): after a new asset is written
        asset_deleted(asset): after an asset is removed from the store
    """

    def __init__(self, store: IAssetStore, registry: AssetRegistry):
        self._store = store
        self._registry = registry
        self._observers: Dict[str, List[Callable]] = {
            'structure_changed': [],
            'value_changed': [],
            'asset_created': [],
            'asset_deleted': [],
        }

    # =========================================================================
    # OBSERVER PATTERN
    # =========================================================================

    def subscribe(self, event: str, callback: Callable):
        """Subscribe to mutation events."""
        if event in self._observers:
            self._observers[event].append(callback)

    def unsubscribe(self, event: str, callback: Callable):
        if event in self._observers and callback in self._observers[event]:
            self._observers[event].remove(callback)

    def _notify(self, event: str, *args):
        for callback in self._observers.get(event, []):
            try:
                callback(*args)
            except Exception as e:
                logger.error(f"Error in mutation observer callback for '{event}': {e}")

    # =========================================================================
    # STRUCTURAL OPERATIONS
    # =========================================================================

    def add_locale(self, asset: LocalizedAsset, language: Language = Language.UNKNOWN) -> LocaleItem:
        """
        Append a new, empty locale item.

        Args:
            asset: Target asset
            language: Language of the new item; UNKNOWN adds an unset placeholder

        Returns:
            The new LocaleItem
        """
        self._require_registered(asset, "add_locale")
        if asset.locale_items.has_language(language):
            raise InvariantViolation(f"Language '{language.value}' already exists in '{asset.name}'",
                                     asset_id=asset.id, operation="add_locale")

        item = LocaleItem(language=language)
        snapshot = asset.locale_items.snapshot()
        asset.locale_items.append(item)

        change = StructuralChange(ChangeKind.ADD_LOCALE, {"index": len(asset.locale_items) - 1,
                                                          "language": language.value})
        self._commit(asset, change, lambda: asset.locale_items.restore(snapshot))
        logger.info(f"Added locale '{language.value}' to '{asset.name}'")
        return item

    def remove_locale(self, asset: LocalizedAsset, item: LocaleItem) -> None:
        self._require_registered(asset, "remove_locale")
        snapshot = asset.locale_items.snapshot()
        try:
            index = asset.locale_items.remove(item)
        except InvariantViolation as e:
            raise InvariantViolation(e.message, asset_id=asset.id, operation="remove_locale") from e

        change = StructuralChange(ChangeKind.REMOVE_LOCALE, {"index": index, "language": item.language.value})
        self._commit(asset, change, lambda: asset.locale_items.restore(snapshot))
        logger.info(f"Removed locale '{item.language.value}' from '{asset.name}'")

    def promote_to_default(self, asset: LocalizedAsset, item: LocaleItem) -> bool:
        """
        Move a locale item to index 0, keeping the relative order of the others.

        Returns:
            True if the order changed, False if the item already was the default
        """
        self._require_registered(asset, "promote_to_default")
        snapshot = asset.locale_items.snapshot()
        try:
            previous_index = asset.locale_items.move_to_front(item)
        except InvariantViolation as e:
            raise InvariantViolation(e.message, asset_id=asset.id, operation="promote_to_default") from e

        if previous_index == 0:
            return False

        change = StructuralChange(ChangeKind.PROMOTE_TO_DEFAULT, {"from_index": previous_index,
                                                                  "language": item.language.value})
        self._commit(asset, change, lambda: asset.locale_items.restore(snapshot))
        logger.info(f"Promoted '{item.language.value}' to default in '{asset.name}'")
        return True

    def rename(self, asset: LocalizedAsset, new_name: str) -> None:
        """Change the display name. The asset id never changes."""
        self._require_registered(asset, "rename")
        new_name = (new_name or "").strip()
        if not new_name:
            raise InvariantViolation("Asset name cannot be empty", asset_id=asset.id, operation="rename")
        if new_name == asset.name:
            return

        old_name = asset.name
        asset.name = new_name

        def rollback():
            asset.name = old_name

        change = StructuralChange(ChangeKind.RENAME, {"old_name": old_name, "new_name": new_name})
        self._commit(asset, change, rollback)
        logger.info(f"Renamed asset '{old_name}' to '{new_name}'")

    def set_language(self, asset: LocalizedAsset, item: LocaleItem, language: Language) -> None:
        self._require_registered(asset, "set_language")
        index = asset.locale_items.index_of(item)
        if index is None:
            raise InvariantViolation("Locale item does not belong to this asset",
                                     asset_id=asset.id, operation="set_language")
        if item.language is language:
            return
        if asset.locale_items.has_language(language, exclude=item):
            raise InvariantViolation(f"Language '{language.value}' already exists in '{asset.name}'",
                                     asset_id=asset.id, operation="set_language")

        old_language = item.language
        item.language = language

        def rollback():
            item.language = old_language

        change = StructuralChange(ChangeKind.SET_LANGUAGE, {"index": index, "old": old_language.value,
                                                            "new": language.value})
        self._commit(asset, change, rollback)

    # =========================================================================
    # NON-STRUCTURAL OPERATIONS
    # =========================================================================

    def set_value(self, asset: LocalizedAsset, item: LocaleItem, value: str) -> None:
        """Edit a locale value by hand. Marks the asset dirty instead of persisting."""
        self._require_registered(asset, "set_value")
        if item not in asset.locale_items:
            raise InvariantViolation("Locale item does not belong to this asset",
                                     asset_id=asset.id, operation="set_value")
        if item.value == value:
            return
        item.value = value
        asset.dirty = True
        self._store.mark_dirty(asset)
        self._notify('value_changed', asset, item)

    def create_asset(self, name: str, value_type: ValueType = ValueType.TEXT,
                     default_language: Language = Language.ENGLISH) -> LocalizedAsset:
        name = (name or "").strip()
        if not name:
            raise InvariantViolation("Asset name cannot be empty", operation="create_asset")
        asset = self._store.create_asset(name, value_type, default_language)
        self._registry.invalidate()
        logger.info(f"Created {value_type.value} asset '{name}'")
        self._notify('asset_created', asset)
        return asset

    def delete_asset(self, asset: LocalizedAsset) -> None:
        self._require_registered(asset, "delete_asset")
        if not self._store.delete_asset(asset):
            raise PersistenceFailure(f"Asset '{asset.name}' could not be deleted", asset_id=asset.id)
        self._registry.invalidate()
        logger.info(f"Deleted asset '{asset.name}'")
        self._notify('asset_deleted', asset)

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _require_registered(self, asset: LocalizedAsset, operation: str) -> None:
        if asset is None or not self._registry.contains(asset):
            asset_id = asset.id if asset is not None else None
            raise NotFoundError(f"Asset no longer exists (operation: {operation})", asset_id=asset_id)

    def _commit(self, asset: LocalizedAsset, change: StructuralChange, rollback: Callable[[], None]) -> None:
        """Persist a structural change, rolling the in-memory change back on rejection."""
        try:
            accepted = self._store.apply_structural_change(asset, change)
        except Exception as e:
            rollback()
            logger.error(f"Store failed on {change.kind.value} for '{asset.name}' ({e}); rolled back")
            raise

        if not accepted:
            rollback()
            logger.error(f"Store rejected {change.kind.value} on '{asset.name}'; rolled back")
            raise PersistenceFailure(f"Store rejected {change.kind.value} on '{asset.name}'", asset_id=asset.id)

        self._notify('structure_changed', asset, change)
