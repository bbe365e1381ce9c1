# -*- coding: utf-8 -*-
"""
LocaleForge Localized Asset Model

A localized asset owns an ordered list of locale items. The first item is
always the default (source) locale, the list is never empty, and no two
items share an explicit language.
"""

import uuid
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from localeforge_enums import Language, ValueType
from localeforge_exceptions import InvariantViolation
from localeforge_logger import get_logger

logger = get_logger("models.localized_asset")


@dataclass(eq=False)
class LocaleItem:
    """
    One language's value inside a localized asset.

    Compared by identity: two items holding the same language and value
    are still different items.
    """
    language: Language = Language.UNKNOWN
    value: str = ""
    item_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def is_empty(self) -> bool:
        return not self.value


class LocaleItemList(Sequence):
    """
    Ordered, never-empty sequence of locale items.

    Index 0 is the default locale. Reordering is only possible through
    move_to_front(); lookups are by identity, never by equality.
    """

    def __init__(self, items: Iterable[LocaleItem]):
        self._items: List[LocaleItem] = list(items)
        if not self._items:
            raise InvariantViolation("A localized asset needs at least one locale item")
        self._check_unique_languages(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __contains__(self, item) -> bool:
        return self.index_of(item) is not None

    def __repr__(self):
        return f"LocaleItemList({self._items!r})"

    @property
    def default(self) -> LocaleItem:
        return self._items[0]

    def index_of(self, item: LocaleItem) -> Optional[int]:
        for index, candidate in enumerate(self._items):
            if candidate is item:
                return index
        return None

    def has_language(self, language: Language, exclude: Optional[LocaleItem] = None) -> bool:
        """Check if an explicit language is already used by another item."""
        if language.is_placeholder:
            return False
        return any(i.language is language and i is not exclude for i in self._items)

    # =========================================================================
    # MUTATORS (used by MutationOps and rollback)
    # =========================================================================

    def append(self, item: LocaleItem) -> None:
        if self.has_language(item.language):
            raise InvariantViolation(f"Language '{item.language.value}' already exists")
        self._items.append(item)

    def remove(self, item: LocaleItem) -> int:
        """Remove an item and return the index it had."""
        index = self.index_of(item)
        if index is None:
            raise InvariantViolation("Locale item does not belong to this asset")
        if len(self._items) <= 1:
            raise InvariantViolation("The last locale item cannot be removed")
        del self._items[index]
        return index

    def move_to_front(self, item: LocaleItem) -> int:
        """Rotate an item to index 0 and return its previous index."""
        if len(self._items) <= 1:
            raise InvariantViolation("A single-locale asset has nothing to promote")
        index = self.index_of(item)
        if index is None:
            raise InvariantViolation("Locale item does not belong to this asset")
        if index > 0:
            self._items.insert(0, self._items.pop(index))
        return index

    def snapshot(self) -> Tuple[LocaleItem, ...]:
        return tuple(self._items)

    def restore(self, snapshot: Tuple[LocaleItem, ...]) -> None:
        """Restore a previous ordering, keeping the same item instances."""
        self._items = list(snapshot)

    @staticmethod
    def _check_unique_languages(items: List[LocaleItem]) -> None:
        seen = set()
        for item in items:
            if item.language.is_placeholder:
                continue
            if item.language in seen:
                logger.warning(f"Duplicate locale language '{item.language.value}' in asset data")
            seen.add(item.language)


class LocalizedAsset:
    """
    A localized asset: a stable id, a display name, a payload type and its
    ordered locale items.

    Equality and hashing use the id only, so an asset keeps its identity
    across renames and registry rescans.
    """

    def __init__(self, asset_id: str, name: str, value_type: ValueType = ValueType.TEXT,
                 locale_items: Optional[Iterable[LocaleItem]] = None):
        self._id = asset_id
        self.name = name
        self.value_type = value_type
        self.locale_items = LocaleItemList(locale_items or [LocaleItem()])
        self.dirty = False

    @property
    def id(self) -> str:
        return self._id

    @property
    def default_item(self) -> LocaleItem:
        return self.locale_items.default

    @property
    def is_text(self) -> bool:
        return self.value_type is ValueType.TEXT

    def __eq__(self, other):
        if not isinstance(other, LocalizedAsset):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return f"LocalizedAsset(id={self._id!r}, name={self.name!r}, items={len(self.locale_items)})"
