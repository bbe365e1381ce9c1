# -*- coding: utf-8 -*-
"""
LocaleForge Controllers Package

Controllers turn view intents into calls on the core and notify the view.
"""

from controllers.explorer_controller import ExplorerController

__all__ = ['ExplorerController']
