# -*- coding: utf-8 -*-
"""
LocaleForge Tree Projection

Builds the two-level hierarchy (asset -> locale items) shown by the
explorer, filtered by the search string. Nodes are derived and ephemeral;
the projection holds no state of its own.

Filter rules:
- An asset whose name contains the search text (case-insensitive) is shown
  with all of its locale items.
- Otherwise an asset is shown if at least one locale item's language name
  matches, and only the matching locale items are shown under it.
- An empty search string matches everything.
"""

import weakref
from dataclasses import dataclass, field
from typing import List, Optional

from models.asset_registry import AssetRegistry
from models.localized_asset import LocaleItem, LocalizedAsset


@dataclass(eq=False)
class LocaleNode:
    """Projection node for one locale item. The parent link is non-owning."""
    item: LocaleItem
    index: int
    _parent_ref: Optional[weakref.ref] = field(default=None, repr=False)

    @property
    def parent(self) -> Optional['AssetNode']:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def is_default(self) -> bool:
        return self.index == 0

    @property
    def display_name(self) -> str:
        return self.item.language.value

    def __eq__(self, other):
        if not isinstance(other, LocaleNode):
            return NotImplemented
        return self.item is other.item and self.index == other.index

    def __hash__(self):
        return hash((id(self.item), self.index))


@dataclass(eq=False)
class AssetNode:
    """Projection node for one localized asset and its visible locale nodes."""
    asset: LocalizedAsset
    locale_nodes: List[LocaleNode] = field(default_factory=list)
    matched_by_name: bool = True

    @property
    def display_name(self) -> str:
        return self.asset.name

    def __eq__(self, other):
        if not isinstance(other, AssetNode):
            return NotImplemented
        return (self.asset == other.asset
                and self.matched_by_name == other.matched_by_name
                and self.locale_nodes == other.locale_nodes)

    def __hash__(self):
        return hash(self.asset)


def _matches(text: str, needle: str) -> bool:
    return needle in text.lower()


def project_asset(asset: LocalizedAsset, search_string: str = "") -> Optional[AssetNode]:
    """Project a single asset, or return None if it does not match."""
    needle = (search_string or "").strip().lower()

    matched_by_name = not needle or _matches(asset.name, needle)
    node = AssetNode(asset=asset, matched_by_name=matched_by_name)
    parent_ref = weakref.ref(node)

    for index, item in enumerate(asset.locale_items):
        if matched_by_name or _matches(item.language.value, needle):
            node.locale_nodes.append(LocaleNode(item=item, index=index, _parent_ref=parent_ref))

    if not matched_by_name and not node.locale_nodes:
        return None
    return node


def project(registry: AssetRegistry, search_string: str = "") -> List[AssetNode]:
    """
    Build the filtered projection of every registered asset.

    Args:
        registry: Asset registry to read from
        search_string: Case-insensitive filter; empty matches everything

    Returns:
        Ordered list of AssetNode, in registry order
    """
    nodes = []
    for asset in registry.all():
        node = project_asset(asset, search_string)
        if node is not None:
            nodes.append(node)
    return nodes
