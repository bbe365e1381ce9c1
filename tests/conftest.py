# -*- coding: utf-8 -*-
"""
LocaleForge Test Fixtures

Shared fixtures for all tests.
"""

import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from interfaces.i_asset_store import IAssetStore, StructuralChange
from interfaces.i_translation import ITranslationService
from localeforge_enums import Language, ValueType
from localeforge_exceptions import PersistenceFailure
from models.localized_asset import LocaleItem, LocalizedAsset


# =============================================================================
# FAKE COLLABORATORS
# =============================================================================

class FakeAssetStore(IAssetStore):
    """In-memory asset store that records every call."""

    def __init__(self, assets: Optional[List[LocalizedAsset]] = None):
        self.assets: List[LocalizedAsset] = list(assets or [])
        self.changes: List[StructuralChange] = []
        self.dirty: List[LocalizedAsset] = []
        self.load_count = 0
        self.reject_changes = False
        self.raise_on_change = False
        self.change_error: Optional[Exception] = None

    def load_all(self):
        self.load_count += 1
        return list(self.assets)

    def mark_dirty(self, asset):
        asset.dirty = True
        if asset not in self.dirty:
            self.dirty.append(asset)

    def apply_structural_change(self, asset, change):
        if self.change_error is not None:
            raise self.change_error
        if self.raise_on_change:
            raise PersistenceFailure("disk full", asset_id=asset.id)
        if self.reject_changes:
            return False
        self.changes.append(change)
        return True

    def create_asset(self, name, value_type=ValueType.TEXT, default_language=Language.ENGLISH):
        asset = LocalizedAsset(f"new-{len(self.assets)}", name, value_type, [LocaleItem(default_language)])
        self.assets.append(asset)
        return asset

    def delete_asset(self, asset):
        if asset not in self.assets:
            return False
        self.assets.remove(asset)
        return True

    def save_dirty(self):
        saved = len(self.dirty)
        for asset in self.dirty:
            asset.dirty = False
        self.dirty.clear()
        return saved


class PendingRequest:
    def __init__(self, source_language, target_language, text, on_success, on_failure):
        self.source_language = source_language
        self.target_language = target_language
        self.text = text
        self.on_success = on_success
        self.on_failure = on_failure


class DeferredTranslationService(ITranslationService):
    """
    Translation service whose requests stay pending until the test resolves
    them, in whatever order it wants.
    """

    def __init__(self):
        self.requests: List[PendingRequest] = []

    def request_translation(self, source_language, target_language, source_text, on_success, on_failure):
        self.requests.append(PendingRequest(source_language, target_language, source_text,
                                            on_success, on_failure))

    def find(self, target_language: Language, nth: int = 0) -> PendingRequest:
        matches = [r for r in self.requests if r.target_language is target_language]
        return matches[nth]

    def succeed(self, target_language: Language, text: str, nth: int = 0):
        self.find(target_language, nth).on_success(text)

    def fail(self, target_language: Language, message: str, nth: int = 0):
        self.find(target_language, nth).on_failure(message)


class ImmediateTranslationService(ITranslationService):
    """Answers every request synchronously with a translate function."""

    def __init__(self, translate: Callable[[str, Language, Language], str]):
        self.translate = translate

    def request_translation(self, source_language, target_language, source_text, on_success, on_failure):
        try:
            result = self.translate(source_text, source_language, target_language)
        except Exception as e:
            on_failure(str(e))
            return
        on_success(result)


# =============================================================================
# MODEL FIXTURES
# =============================================================================

def make_asset(asset_id: str, name: str, *locales, value_type: ValueType = ValueType.TEXT) -> LocalizedAsset:
    """Build an asset from (Language, value) pairs."""
    items = [LocaleItem(language=language, value=value) for language, value in locales]
    return LocalizedAsset(asset_id, name, value_type, items)


@pytest.fixture
def greeting_asset() -> LocalizedAsset:
    """Text asset with an English default and empty French/German locales."""
    return make_asset("greeting", "Greeting",
                      (Language.ENGLISH, "Hello"),
                      (Language.FRENCH, ""),
                      (Language.GERMAN, ""))


@pytest.fixture
def sample_assets(greeting_asset) -> List[LocalizedAsset]:
    return [
        greeting_asset,
        make_asset("farewell", "Farewell",
                   (Language.ENGLISH, "Goodbye"),
                   (Language.SPANISH, "Adiós")),
        make_asset("logo", "Logo Sprite",
                   (Language.ENGLISH, "logo_en.png"),
                   value_type=ValueType.SPRITE),
    ]


@pytest.fixture
def store(sample_assets) -> FakeAssetStore:
    return FakeAssetStore(sample_assets)


@pytest.fixture
def registry(store):
    from models.asset_registry import AssetRegistry
    return AssetRegistry(store)


@pytest.fixture
def mutations(store, registry):
    from core.mutation_ops import MutationOps
    return MutationOps(store, registry)


# =============================================================================
# TRANSLATION FIXTURES
# =============================================================================

@pytest.fixture
def deferred_service() -> DeferredTranslationService:
    return DeferredTranslationService()


@pytest.fixture
def engine(qapp, deferred_service, store, registry):
    """TranslationEngine over the deferred service (no timeout)."""
    from core.translation_engine import TranslationEngine
    return TranslationEngine(deferred_service, store, registry)


@pytest.fixture
def controller(qapp, store, registry, mutations, engine):
    from controllers.explorer_controller import ExplorerController
    ctrl = ExplorerController(store, registry, mutations, engine)
    ctrl.rebuild()
    return ctrl


# =============================================================================
# TEMP FILE FIXTURES
# =============================================================================

@pytest.fixture
def assets_dir(tmp_path) -> Path:
    """Directory with two asset files and one corrupt file."""
    import json

    directory = tmp_path / "assets"
    directory.mkdir()
    (directory / "greeting.asset.json").write_text(json.dumps({
        "id": "greeting",
        "name": "Greeting",
        "value_type": "text",
        "locale_items": [
            {"language": "English", "value": "Hello"},
            {"language": "French", "value": ""},
        ],
    }), encoding="utf-8")
    (directory / "logo.asset.json").write_text(json.dumps({
        "id": "logo",
        "name": "Logo",
        "value_type": "sprite",
        "locale_items": [{"language": "English", "value": "logo.png"}],
    }), encoding="utf-8")
    (directory / "broken.asset.json").write_text("{not json", encoding="utf-8")
    return directory
