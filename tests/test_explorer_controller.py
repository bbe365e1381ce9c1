# -*- coding: utf-8 -*-
"""
Tests for ExplorerController: selection, enable state and operator intents.
"""

import pytest

from localeforge_enums import Language, ValueType
from models.selection import AssetSelection, LocaleSelection, NO_SELECTION


@pytest.fixture
def signals(controller):
    events = {'refresh': [], 'selection': [], 'failed': [], 'translation_failed': [], 'status': []}
    controller.refresh_needed.connect(events['refresh'].append)
    controller.selection_changed.connect(events['selection'].append)
    controller.operation_failed.connect(events['failed'].append)
    controller.translation_failed.connect(events['translation_failed'].append)
    controller.status_message.connect(events['status'].append)
    return events


class TestSearchAndSelection:

    def test_initial_projection(self, controller):
        assert [node.asset.id for node in controller.projection] == ["farewell", "greeting", "logo"]
        assert controller.selection is NO_SELECTION

    def test_search_rebuilds(self, controller, signals):
        controller.set_search_string("German")
        assert [node.asset.id for node in controller.projection] == ["greeting"]
        assert len(signals['refresh']) == 1

        controller.set_search_string("German")
        assert len(signals['refresh']) == 1

    def test_select_emits_once(self, controller, signals, greeting_asset):
        controller.select_asset(greeting_asset)
        controller.select_asset(greeting_asset)
        assert signals['selection'] == [AssetSelection(greeting_asset)]

    def test_selection_of_deleted_asset_is_cleared(self, controller, store, greeting_asset):
        controller.select_asset(greeting_asset)
        store.assets.remove(greeting_asset)
        controller.refresh()
        assert controller.selection is NO_SELECTION

    def test_selection_of_removed_item_falls_back_to_asset(self, controller, mutations, greeting_asset):
        french = greeting_asset.locale_items[1]
        controller.select_locale(greeting_asset, french)
        greeting_asset.locale_items.remove(french)
        controller.rebuild()
        assert controller.selection == AssetSelection(greeting_asset)


class TestControlState:

    def test_nothing_selected(self, controller):
        assert not controller.can_rename()
        assert not controller.can_delete()
        assert not controller.can_translate()
        assert not controller.can_add_locale()
        assert not controller.can_make_default()
        assert not controller.can_remove_locale()

    def test_text_asset_selected(self, controller, greeting_asset):
        controller.select_asset(greeting_asset)
        assert controller.can_rename()
        assert controller.can_delete()
        assert controller.can_translate()
        assert controller.can_add_locale()
        assert not controller.can_remove_locale()
        assert controller.translation_sources() == [greeting_asset.default_item]

    def test_sprite_cannot_translate(self, controller, registry):
        controller.select_asset(registry.find("logo"))
        assert not controller.can_translate()

    def test_single_locale_cannot_be_removed(self, controller, registry):
        logo = registry.find("logo")
        controller.select_locale(logo, logo.default_item)
        assert not controller.can_remove_locale()
        assert not controller.can_make_default()
        assert not controller.can_rename()

    def test_locale_selected(self, controller, greeting_asset):
        controller.select_locale(greeting_asset, greeting_asset.locale_items[1])
        assert controller.can_remove_locale()
        assert controller.can_make_default()
        assert controller.can_translate()


class TestIntents:

    def test_add_locale_selects_new_item(self, controller, greeting_asset):
        controller.select_asset(greeting_asset)
        item = controller.add_locale()
        assert item is greeting_asset.locale_items[-1]
        assert controller.selection == LocaleSelection(greeting_asset, item)

    def test_add_locale_without_selection_fails(self, controller, signals):
        assert controller.add_locale() is None
        assert len(signals['failed']) == 1

    def test_make_default_rebuilds_projection(self, controller, signals, greeting_asset):
        german = greeting_asset.locale_items[2]
        controller.select_locale(greeting_asset, german)
        assert controller.make_default()

        node = next(n for n in controller.projection if n.asset is greeting_asset)
        assert node.locale_nodes[0].item is german
        assert signals['refresh']

    def test_remove_locale_selects_asset(self, controller, greeting_asset):
        french = greeting_asset.locale_items[1]
        controller.select_locale(greeting_asset, french)
        assert controller.remove_locale()
        assert french not in greeting_asset.locale_items
        assert controller.selection == AssetSelection(greeting_asset)

    def test_rejected_operation_reports_failure(self, controller, signals, store, greeting_asset):
        store.reject_changes = True
        controller.select_locale(greeting_asset, greeting_asset.locale_items[2])
        assert controller.make_default() is False
        assert greeting_asset.locale_items[0].language is Language.ENGLISH
        assert len(signals['failed']) == 1

    def test_rename(self, controller, greeting_asset):
        controller.select_asset(greeting_asset)
        assert controller.rename("Hello Text")
        assert greeting_asset.name == "Hello Text"
        assert controller.rename("") is False

    def test_set_value(self, controller, greeting_asset):
        french = greeting_asset.locale_items[1]
        controller.select_locale(greeting_asset, french)
        assert controller.set_value(french, "Bonjour")
        assert french.value == "Bonjour"
        assert greeting_asset.dirty

    def test_set_language(self, controller, greeting_asset):
        item = greeting_asset.locale_items[2]
        controller.select_locale(greeting_asset, item)
        assert controller.set_language(item, Language.ITALIAN)
        assert item.language is Language.ITALIAN

    def test_create_and_delete(self, controller, registry):
        asset = controller.create_asset("Credits", ValueType.TEXT)
        assert controller.selection == AssetSelection(asset)
        assert asset in [node.asset for node in controller.projection]

        assert controller.delete_asset()
        assert controller.selection is NO_SELECTION
        assert registry.find(asset.id) is None

    def test_save(self, controller, signals, store, greeting_asset):
        controller.select_locale(greeting_asset, greeting_asset.locale_items[1])
        controller.set_value(greeting_asset.locale_items[1], "Bonjour")
        assert controller.save() == 1
        assert not greeting_asset.dirty
        assert signals['status'][-1] == "Saved 1 asset(s)"


class TestTranslate:

    def test_translate_fills_missing_locales(self, controller, signals, deferred_service, greeting_asset):
        controller.select_asset(greeting_asset)
        batch = controller.translate(greeting_asset.default_item)
        assert len(batch.requests) == 2

        deferred_service.succeed(Language.FRENCH, "Bonjour")
        deferred_service.fail(Language.GERMAN, "quota exceeded")

        assert greeting_asset.locale_items[1].value == "Bonjour"
        assert signals['translation_failed'] == ["German: quota exceeded"]
        assert "1 translated, 1 failed" in signals['status'][-1]
        node = next(n for n in controller.projection if n.asset is greeting_asset)
        assert node.locale_nodes[1].item.value == "Bonjour"

    def test_translate_sprite_fails(self, controller, signals, registry):
        logo = registry.find("logo")
        controller.select_asset(logo)
        assert controller.translate(logo.default_item) is None
        assert len(signals['failed']) == 1
