# -*- coding: utf-8 -*-
"""
Smoke tests for the explorer window.
"""

import pytest

from localeforge_enums import Language


@pytest.fixture
def window(qtbot, controller):
    from gui.explorer_window import ExplorerWindow

    w = ExplorerWindow(controller)
    qtbot.addWidget(w)
    return w


def row_titles(model):
    return [model.item(row, 0).text() for row in range(model.rowCount())]


class TestExplorerWindow:

    def test_tree_populated(self, window):
        assert row_titles(window.model) == ["Farewell", "Greeting", "Logo Sprite"]
        greeting = window.model.item(1, 0)
        assert greeting.rowCount() == 3
        assert greeting.child(0, 0).text() == "English (default)"
        assert greeting.child(0, 1).text() == "Hello"

    def test_search_filters_tree(self, window):
        window.search_edit.setText("spanish")
        assert row_titles(window.model) == ["Farewell"]
        assert window.model.item(0, 0).rowCount() == 1

    def test_buttons_follow_selection(self, window, controller):
        assert not window.rename_button.isEnabled()
        assert not window.remove_locale_button.isEnabled()

        window.tree_view.setCurrentIndex(window.model.item(1, 0).index())
        assert controller.selection.owning_asset.id == "greeting"
        assert window.rename_button.isEnabled()
        assert window.translate_button.isEnabled()
        assert not window.remove_locale_button.isEnabled()

        window.tree_view.setCurrentIndex(window.model.item(1, 0).child(2, 0).index())
        assert controller.selection.locale_item.language is Language.GERMAN
        assert window.remove_locale_button.isEnabled()
        assert window.make_default_button.isEnabled()
        assert not window.rename_button.isEnabled()

    def test_make_default_keeps_selection(self, window, controller):
        window.tree_view.setCurrentIndex(window.model.item(1, 0).child(2, 0).index())
        window.make_default_button.click()

        greeting = window.model.item(1, 0)
        assert greeting.child(0, 0).text() == "German (default)"
        assert controller.selection.locale_item.language is Language.GERMAN
        assert window.tree_view.currentIndex().data() == "German (default)"

    def test_value_edit_applied(self, qtbot, window, greeting_asset):
        french_value = window.model.item(1, 0).child(1, 1)
        french_value.setText("Bonjour")
        qtbot.waitUntil(lambda: greeting_asset.locale_items[1].value == "Bonjour", timeout=2000)
        assert greeting_asset.dirty
        assert row_titles(window.model)[1] == "Greeting *"

    def test_translation_failure_shown_in_status(self, window, controller, deferred_service, greeting_asset):
        controller.select_asset(greeting_asset)
        controller.translate(greeting_asset.default_item)
        deferred_service.fail(Language.FRENCH, "offline")
        assert "French: offline" in window.status_label.text()
