# -*- coding: utf-8 -*-
"""
Explorer selection as a tagged variant.

The explorer selection is exactly one of NoSelection, AssetSelection or
LocaleSelection. owning_asset gives the asset behind any selection, so
callers never need to check node types themselves.
"""

from dataclasses import dataclass
from typing import Optional, Union

from models.localized_asset import LocaleItem, LocalizedAsset


@dataclass(frozen=True)
class NoSelection:
    @property
    def owning_asset(self) -> Optional[LocalizedAsset]:
        return None

    @property
    def locale_item(self) -> Optional[LocaleItem]:
        return None


@dataclass(frozen=True)
class AssetSelection:
    asset: LocalizedAsset

    @property
    def owning_asset(self) -> Optional[LocalizedAsset]:
        return self.asset

    @property
    def locale_item(self) -> Optional[LocaleItem]:
        return None


@dataclass(frozen=True)
class LocaleSelection:
    asset: LocalizedAsset
    item: LocaleItem

    @property
    def owning_asset(self) -> Optional[LocalizedAsset]:
        return self.asset

    @property
    def locale_item(self) -> Optional[LocaleItem]:
        return self.item


Selection = Union[NoSelection, AssetSelection, LocaleSelection]

NO_SELECTION = NoSelection()
