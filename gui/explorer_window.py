# -*- coding: utf-8 -*-
"""
Localization Explorer window.

Thin view over ExplorerController: a search box, a two-column tree
(asset -> locale items) and a bottom toolbar. All decisions about what is
enabled and what happens on click are made by the controller.
"""

from typing import List, Optional

from gui.qt import (
    Qt, QModelIndex, QTimer, QStandardItem, QStandardItemModel,
    QWidget, QMessageBox, QInputDialog, QVBoxLayout, QHBoxLayout,
    QTreeView, QHeaderView, QAbstractItemView, QLabel, QLineEdit, QToolButton, QMenu,
)
import localeforge_config as config
from controllers.explorer_controller import ExplorerController
from models.selection import AssetSelection, LocaleSelection, Selection
from models.tree_projection import AssetNode, LocaleNode
from localeforge_enums import Language, ValueType
from localeforge_logger import get_logger

logger = get_logger("gui.explorer_window")

NODE_ROLE = Qt.ItemDataRole.UserRole + 1

COLUMN_NAME = 0
COLUMN_VALUE = 1


class ExplorerWindow(QWidget):
    """Searchable tree of localized assets with the explorer toolbar."""

    def __init__(self, controller: ExplorerController, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._controller = controller
        self._rebuilding = False

        self.setWindowTitle(config.WINDOW_NAME)
        self._build_ui()
        self._connect_signals()

        self._populate(controller.projection)
        self._update_controls()

    # =========================================================================
    # UI CONSTRUCTION
    # =========================================================================

    def _build_ui(self):
        layout = QVBoxLayout(self)

        self.search_edit = QLineEdit(self)
        self.search_edit.setPlaceholderText("Search assets or languages")
        self.search_edit.setClearButtonEnabled(True)
        layout.addWidget(self.search_edit)

        self.model = QStandardItemModel(0, 2, self)
        self.model.setHorizontalHeaderLabels(["Name", "Value"])

        self.tree_view = QTreeView(self)
        self.tree_view.setModel(self.model)
        self.tree_view.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.tree_view.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.tree_view.setEditTriggers(QAbstractItemView.EditTrigger.DoubleClicked
                                       | QAbstractItemView.EditTrigger.EditKeyPressed)
        self.tree_view.header().setSectionResizeMode(COLUMN_NAME, QHeaderView.ResizeMode.ResizeToContents)
        self.tree_view.header().setStretchLastSection(True)
        layout.addWidget(self.tree_view, 1)

        toolbar = QHBoxLayout()
        self.refresh_button = self._tool_button("Refresh", "Refresh the window")
        self.create_button = self._tool_button("Create", "Create a new localized asset.")
        self.rename_button = self._tool_button("Rename", "Rename the selected localized asset.")
        self.delete_button = self._tool_button("Delete", "Delete the selected localized asset.")
        self.save_button = self._tool_button("Save", "Save modified assets.")
        self.translate_button = self._tool_button("Translate By", "Translate missing locales.")
        self.make_default_button = self._tool_button("Make Default", "Make selected locale as default.")
        self.language_button = self._tool_button("Language", "Change the language of the selected locale.")
        self.add_locale_button = self._tool_button("+", "Adds locale for selected asset.")
        self.remove_locale_button = self._tool_button("-", "Removes selected locale.")

        for button in (self.refresh_button, self.create_button, self.rename_button,
                       self.delete_button, self.save_button):
            toolbar.addWidget(button)
        toolbar.addStretch(1)
        for button in (self.translate_button, self.make_default_button, self.language_button,
                       self.add_locale_button, self.remove_locale_button):
            toolbar.addWidget(button)
        layout.addLayout(toolbar)

        self.status_label = QLabel("", self)
        layout.addWidget(self.status_label)

        self.resize(config.DEFAULT_WINDOW_W, config.DEFAULT_WINDOW_H)

    def _tool_button(self, text: str, tooltip: str) -> QToolButton:
        button = QToolButton(self)
        button.setText(text)
        button.setToolTip(tooltip)
        return button

    def _connect_signals(self):
        c = self._controller
        c.refresh_needed.connect(self._on_refresh_needed)
        c.selection_changed.connect(lambda _selection: self._update_controls())
        c.operation_failed.connect(self._on_operation_failed)
        c.translation_failed.connect(self._on_translation_failed)
        c.status_message.connect(self.status_label.setText)

        self.search_edit.textChanged.connect(c.set_search_string)
        self.tree_view.selectionModel().selectionChanged.connect(self._on_tree_selection_changed)
        self.model.itemChanged.connect(self._on_item_changed)

        self.refresh_button.clicked.connect(c.refresh)
        self.create_button.clicked.connect(self._on_create_clicked)
        self.rename_button.clicked.connect(self._on_rename_clicked)
        self.delete_button.clicked.connect(self._on_delete_clicked)
        self.save_button.clicked.connect(c.save)
        self.translate_button.clicked.connect(self._on_translate_clicked)
        self.make_default_button.clicked.connect(c.make_default)
        self.language_button.clicked.connect(self._on_language_clicked)
        self.add_locale_button.clicked.connect(lambda: c.add_locale())
        self.remove_locale_button.clicked.connect(c.remove_locale)

    # =========================================================================
    # MODEL POPULATION
    # =========================================================================

    def _populate(self, projection: List[AssetNode]):
        self._rebuilding = True
        try:
            self.model.removeRows(0, self.model.rowCount())
            for asset_node in projection:
                asset_row = self._asset_row(asset_node)
                for locale_node in asset_node.locale_nodes:
                    asset_row[0].appendRow(self._locale_row(locale_node))
                self.model.appendRow(asset_row)
            self.tree_view.expandAll()
            self._restore_selection(self._controller.selection)
        finally:
            self._rebuilding = False

    @staticmethod
    def _asset_row(node: AssetNode) -> List[QStandardItem]:
        title = node.display_name + (" *" if node.asset.dirty else "")
        name_item = QStandardItem(title)
        name_item.setEditable(False)
        name_item.setData(node, NODE_ROLE)
        type_item = QStandardItem(node.asset.value_type.value)
        type_item.setEditable(False)
        type_item.setData(node, NODE_ROLE)
        return [name_item, type_item]

    @staticmethod
    def _locale_row(node: LocaleNode) -> List[QStandardItem]:
        title = node.display_name + (" (default)" if node.is_default else "")
        name_item = QStandardItem(title)
        name_item.setEditable(False)
        name_item.setData(node, NODE_ROLE)
        value_item = QStandardItem(node.item.value)
        value_item.setData(node, NODE_ROLE)
        return [name_item, value_item]

    def _restore_selection(self, selection: Selection):
        target = None
        for row in range(self.model.rowCount()):
            asset_item = self.model.item(row, COLUMN_NAME)
            asset_node = asset_item.data(NODE_ROLE)
            if selection.owning_asset is None or asset_node.asset != selection.owning_asset:
                continue
            target = asset_item.index()
            if isinstance(selection, LocaleSelection):
                for child_row in range(asset_item.rowCount()):
                    child = asset_item.child(child_row, COLUMN_NAME)
                    if child.data(NODE_ROLE).item is selection.item:
                        target = child.index()
                        break
            break

        if target is None:
            self.tree_view.clearSelection()
        else:
            self.tree_view.setCurrentIndex(target)

    # =========================================================================
    # CONTROLLER -> VIEW
    # =========================================================================

    def _on_refresh_needed(self, projection: list):
        self._populate(projection)
        self._update_controls()

    def _update_controls(self):
        c = self._controller
        self.rename_button.setEnabled(c.can_rename())
        self.delete_button.setEnabled(c.can_delete())
        self.translate_button.setEnabled(c.can_translate())
        self.make_default_button.setEnabled(c.can_make_default())
        self.language_button.setEnabled(isinstance(c.selection, LocaleSelection))
        self.add_locale_button.setEnabled(c.can_add_locale())
        self.remove_locale_button.setEnabled(c.can_remove_locale())

    def _on_operation_failed(self, message: str):
        QMessageBox.warning(self, config.WINDOW_NAME, message)

    def _on_translation_failed(self, message: str):
        self.status_label.setText(f"Translation failed - {message}")

    # =========================================================================
    # VIEW -> CONTROLLER
    # =========================================================================

    def _node_at(self, index: QModelIndex):
        if not index.isValid():
            return None
        return index.data(NODE_ROLE)

    def _on_tree_selection_changed(self, *_args):
        if self._rebuilding:
            return
        node = self._node_at(self.tree_view.currentIndex())
        if isinstance(node, AssetNode):
            self._controller.select_asset(node.asset)
        elif isinstance(node, LocaleNode) and node.parent is not None:
            self._controller.select_locale(node.parent.asset, node.item)
        else:
            self._controller.clear_selection()

    def _on_item_changed(self, item: QStandardItem):
        if self._rebuilding or item.column() != COLUMN_VALUE:
            return
        node = item.data(NODE_ROLE)
        if isinstance(node, LocaleNode) and node.parent is not None:
            asset, locale_item, text = node.parent.asset, node.item, item.text()
            # Rebuilding the model inside its own itemChanged emission is unsafe
            QTimer.singleShot(0, lambda: self._apply_value_edit(asset, locale_item, text))

    def _apply_value_edit(self, asset, locale_item, text: str):
        self._controller.select_locale(asset, locale_item)
        self._controller.set_value(locale_item, text)

    def _on_create_clicked(self):
        name, ok = QInputDialog.getText(self, "Create", "Asset name:")
        if not ok or not name.strip():
            return
        types = [t.value for t in ValueType]
        value_type, ok = QInputDialog.getItem(self, "Create", "Value type:", types, 0, False)
        if ok:
            self._controller.create_asset(name, ValueType(value_type))

    def _on_rename_clicked(self):
        selection = self._controller.selection
        if not isinstance(selection, AssetSelection):
            return
        name, ok = QInputDialog.getText(self, "Rename", "New name:", text=selection.asset.name)
        if ok:
            self._controller.rename(name)

    def _on_delete_clicked(self):
        selection = self._controller.selection
        if not isinstance(selection, AssetSelection):
            return
        answer = QMessageBox.question(self, "Delete", f"Delete '{selection.asset.name}'?")
        if answer == QMessageBox.StandardButton.Yes:
            self._controller.delete_asset()

    def _on_translate_clicked(self):
        menu = QMenu(self)
        for item in self._controller.translation_sources():
            action = menu.addAction(item.language.value)
            action.triggered.connect(lambda _checked=False, source=item: self._controller.translate(source))
        menu.exec(self.translate_button.mapToGlobal(self.translate_button.rect().bottomLeft()))

    def _on_language_clicked(self):
        selection = self._controller.selection
        if not isinstance(selection, LocaleSelection):
            return
        names = [language.value for language in Language]
        current = names.index(selection.item.language.value)
        name, ok = QInputDialog.getItem(self, "Language", "Locale language:", names, current, False)
        if ok:
            self._controller.set_language(selection.item, Language(name))
