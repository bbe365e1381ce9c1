# -*- coding: utf-8 -*-
"""
LocaleForge Explorer Controller

Turns operator intents from the explorer window into calls on the core:
- Search string and selection state
- Structural operations (add/remove/promote/rename/delete/create)
- Machine translation of missing locales
- Rebuilding the tree projection after every state change

Signals:
    refresh_needed(list): the rebuilt projection (list of AssetNode)
    selection_changed(object): the new Selection
    operation_failed(str): an operator intent was rejected
    translation_failed(str): one target language could not be translated
    status_message(str): short human-readable status for the shell
"""

from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal

from core.mutation_ops import MutationOps
from core.translation_engine import TranslationBatch, TranslationEngine
from interfaces.i_asset_store import IAssetStore
from models.asset_registry import AssetRegistry
from models.localized_asset import LocaleItem, LocalizedAsset
from models.selection import AssetSelection, LocaleSelection, NO_SELECTION, Selection
from models.tree_projection import AssetNode, project
from localeforge_enums import Language, ValueType
from localeforge_exceptions import LocaleForgeError
from localeforge_logger import get_logger

logger = get_logger("controllers.explorer")


class ExplorerController(QObject):
    """Owner-thread coordinator between the explorer view and the core."""

    refresh_needed = Signal(list)
    selection_changed = Signal(object)
    operation_failed = Signal(str)
    translation_failed = Signal(str)
    status_message = Signal(str)

    def __init__(self, store: IAssetStore, registry: AssetRegistry, mutations: MutationOps,
                 engine: TranslationEngine, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._store = store
        self._registry = registry
        self._mutations = mutations
        self._engine = engine

        self._search_string = ""
        self._selection: Selection = NO_SELECTION
        self._projection: List[AssetNode] = []

        for event in ('structure_changed', 'value_changed', 'asset_created', 'asset_deleted'):
            self._mutations.subscribe(event, self._on_model_changed)
        self._engine.asset_changed.connect(self._on_model_changed)
        self._engine.item_failed.connect(self._on_translation_failed)
        self._engine.batch_settled.connect(self._on_batch_settled)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def projection(self) -> List[AssetNode]:
        return list(self._projection)

    @property
    def search_string(self) -> str:
        return self._search_string

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def engine(self) -> TranslationEngine:
        return self._engine

    # =========================================================================
    # PROJECTION & SEARCH
    # =========================================================================

    def rebuild(self) -> List[AssetNode]:
        """Rebuild the projection synchronously and notify the view."""
        self._projection = project(self._registry, self._search_string)
        self._revalidate_selection()
        self.refresh_needed.emit(list(self._projection))
        return list(self._projection)

    def set_search_string(self, text: str) -> None:
        text = text or ""
        if text == self._search_string:
            return
        self._search_string = text
        self.rebuild()

    def refresh(self) -> None:
        """Discard the registry cache and rescan every asset."""
        self._registry.invalidate()
        self.rebuild()

    # =========================================================================
    # SELECTION
    # =========================================================================

    def select(self, selection: Optional[Selection]) -> None:
        selection = selection or NO_SELECTION
        if selection == self._selection:
            return
        self._selection = selection
        self.selection_changed.emit(selection)

    def select_asset(self, asset: LocalizedAsset) -> None:
        self.select(AssetSelection(asset))

    def select_locale(self, asset: LocalizedAsset, item: LocaleItem) -> None:
        self.select(LocaleSelection(asset, item))

    def clear_selection(self) -> None:
        self.select(NO_SELECTION)

    def _revalidate_selection(self) -> None:
        """Drop selections that point at assets or items that no longer exist."""
        asset = self._selection.owning_asset
        if asset is None:
            return
        current = self._registry.find(asset.id)
        if current is None:
            self.select(NO_SELECTION)
            return
        item = self._selection.locale_item
        if item is not None and item in current.locale_items:
            updated = LocaleSelection(current, item)
        else:
            updated = AssetSelection(current)
        # A rescan may hand out a new instance with the same id
        if updated != self._selection or current is not asset:
            self._selection = updated
            self.selection_changed.emit(updated)

    # =========================================================================
    # CONTROL STATE
    # =========================================================================

    def can_rename(self) -> bool:
        return isinstance(self._selection, AssetSelection)

    def can_delete(self) -> bool:
        return isinstance(self._selection, AssetSelection)

    def can_translate(self) -> bool:
        asset = self._selection.owning_asset
        return asset is not None and asset.is_text and bool(self._engine.translation_sources(asset))

    def can_make_default(self) -> bool:
        return (isinstance(self._selection, LocaleSelection)
                and len(self._selection.asset.locale_items) > 1)

    def can_add_locale(self) -> bool:
        return self._selection.owning_asset is not None

    def can_remove_locale(self) -> bool:
        return (isinstance(self._selection, LocaleSelection)
                and len(self._selection.asset.locale_items) > 1)

    def translation_sources(self) -> List[LocaleItem]:
        """Source choices for the "Translate By" menu of the selected asset."""
        return self._engine.translation_sources(self._selection.owning_asset)

    # =========================================================================
    # OPERATOR INTENTS
    # =========================================================================

    def add_locale(self, language: Language = Language.UNKNOWN) -> Optional[LocaleItem]:
        asset = self._selection.owning_asset
        item = self._run("add locale", lambda: self._mutations.add_locale(asset, language))
        if item is not None:
            self.select_locale(asset, item)
        return item

    def remove_locale(self) -> bool:
        selection = self._selection
        if not isinstance(selection, LocaleSelection):
            self.operation_failed.emit("Select a locale to remove")
            return False
        done = self._run("remove locale",
                         lambda: self._mutations.remove_locale(selection.asset, selection.item) or True)
        if done:
            self.select_asset(selection.asset)
        return bool(done)

    def make_default(self) -> bool:
        selection = self._selection
        if not isinstance(selection, LocaleSelection):
            self.operation_failed.emit("Select a locale to make default")
            return False
        return bool(self._run("make default",
                              lambda: self._mutations.promote_to_default(selection.asset, selection.item)))

    def rename(self, new_name: str) -> bool:
        selection = self._selection
        if not isinstance(selection, AssetSelection):
            self.operation_failed.emit("Select an asset to rename")
            return False
        return bool(self._run("rename", lambda: self._mutations.rename(selection.asset, new_name) or True))

    def set_language(self, item: LocaleItem, language: Language) -> bool:
        asset = self._selection.owning_asset
        return bool(self._run("set language",
                              lambda: self._mutations.set_language(asset, item, language) or True))

    def set_value(self, item: LocaleItem, value: str) -> bool:
        asset = self._selection.owning_asset
        return bool(self._run("set value", lambda: self._mutations.set_value(asset, item, value) or True))

    def create_asset(self, name: str, value_type: ValueType = ValueType.TEXT,
                     default_language: Language = Language.ENGLISH) -> Optional[LocalizedAsset]:
        asset = self._run("create asset",
                          lambda: self._mutations.create_asset(name, value_type, default_language))
        if asset is not None:
            self.select_asset(self._registry.find(asset.id) or asset)
        return asset

    def delete_asset(self) -> bool:
        selection = self._selection
        if not isinstance(selection, AssetSelection):
            self.operation_failed.emit("Select an asset to delete")
            return False
        done = self._run("delete asset", lambda: self._mutations.delete_asset(selection.asset) or True)
        if done:
            self.clear_selection()
            self.rebuild()
        return bool(done)

    def translate(self, source_item: LocaleItem) -> Optional[TranslationBatch]:
        """Translate every empty locale of the selected asset from source_item."""
        asset = self._selection.owning_asset
        batch = self._run("translate", lambda: self._engine.translate_missing_locales(asset, source_item))
        if batch is not None:
            self.status_message.emit(f"Translating {len(batch.requests)} locale(s) of '{asset.name}'...")
        return batch

    def save(self) -> int:
        saved = self._run("save", self._store.save_dirty)
        if saved is not None:
            self.status_message.emit(f"Saved {saved} asset(s)")
            self.rebuild()
        return saved or 0

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _run(self, operation: str, action: Callable):
        try:
            return action()
        except LocaleForgeError as e:
            logger.warning(f"{operation} failed: {e}")
            self.operation_failed.emit(e.message)
            return None

    def _on_model_changed(self, *args) -> None:
        self.rebuild()

    def _on_translation_failed(self, request, failure) -> None:
        self.translation_failed.emit(f"{failure.target_lang}: {failure.message}")

    def _on_batch_settled(self, batch: TranslationBatch) -> None:
        self.status_message.emit(
            f"Translation of '{batch.asset.name}' finished: "
            f"{batch.completed_count} translated, {batch.failed_count} failed"
        )
