# -*- coding: utf-8 -*-
"""
Central Qt Import Module for LocaleForge

This module provides a single source for all Qt widget imports, ensuring
consistency across the application. The project uses PySide6 exclusively.

Usage:
    from gui.qt import Qt, QWidget, QTreeView, ...
"""

# =============================================================================
# PySide6 Core
# =============================================================================
from PySide6.QtCore import (
    Qt,
    QModelIndex,
    QTimer,
)

# =============================================================================
# PySide6 GUI
# =============================================================================
from PySide6.QtGui import (
    QStandardItem,
    QStandardItemModel,
)

# =============================================================================
# PySide6 Widgets
# =============================================================================
from PySide6.QtWidgets import (
    QApplication,
    QWidget,
    QMessageBox,
    QInputDialog,
    # Layouts
    QVBoxLayout,
    QHBoxLayout,
    # Views
    QTreeView,
    QHeaderView,
    QAbstractItemView,
    # Controls
    QLabel,
    QLineEdit,
    QToolButton,
    # Menus
    QMenu,
)


def get_qt_binding():
    """Return the name of the Qt binding in use."""
    return "PySide6"


__all__ = [
    # Core
    'Qt', 'QModelIndex', 'QTimer',
    # GUI
    'QStandardItem', 'QStandardItemModel',
    # Widgets
    'QApplication', 'QWidget', 'QMessageBox', 'QInputDialog',
    'QVBoxLayout', 'QHBoxLayout',
    'QTreeView', 'QHeaderView', 'QAbstractItemView',
    'QLabel', 'QLineEdit', 'QToolButton', 'QMenu',
    # Utility
    'get_qt_binding',
]
