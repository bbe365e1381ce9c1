# -*- coding: utf-8 -*-
"""
LocaleForge Interfaces Package

Abstract boundaries to the collaborators the core depends on: asset
persistence and machine translation.
"""

from interfaces.i_asset_store import IAssetStore, StructuralChange
from interfaces.i_translation import ITranslationEngine, ITranslationService

__all__ = [
    'IAssetStore',
    'StructuralChange',
    'ITranslationEngine',
    'ITranslationService',
]
