# -*- coding: utf-8 -*-
"""
LocaleForge Models Package

Data model of the localization explorer: localized assets and their locale
items, the asset registry and the tree projection built from it.
"""

from models.localized_asset import LocaleItem, LocaleItemList, LocalizedAsset
from models.asset_registry import AssetRegistry

__all__ = ['LocaleItem', 'LocaleItemList', 'LocalizedAsset', 'AssetRegistry']
