from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, TYPE_CHECKING

from localeforge_enums import ChangeKind, Language, ValueType

if TYPE_CHECKING:
    from models.localized_asset import LocalizedAsset


@dataclass(frozen=True)
class StructuralChange:
    """
    Description of one structural mutation handed to the store.

    detail keys depend on kind, e.g. {"index": 2} for REMOVE_LOCALE or
    {"old_name": ..., "new_name": ...} for RENAME.
    """
    kind: ChangeKind
    detail: Dict[str, Any] = field(default_factory=dict)


class IAssetStore(ABC):
    """
    Interface for asset persistence.

    The core only relies on these operations and on LocaleItem instances
    surviving a structural change round-trip unchanged.
    """

    @abstractmethod
    def load_all(self) -> Iterable['LocalizedAsset']:
        """Load every localized asset of the project."""
        pass

    @abstractmethod
    def mark_dirty(self, asset: 'LocalizedAsset') -> None:
        """Flag an asset as having in-memory changes not yet persisted."""
        pass

    @abstractmethod
    def apply_structural_change(self, asset: 'LocalizedAsset', change: StructuralChange) -> bool:
        """
        Persist the asset's current structure.

        Returns:
            True if the store accepted the change, False if it rejected it.
        """
        pass

    @abstractmethod
    def create_asset(self, name: str, value_type: ValueType, default_language: Language) -> 'LocalizedAsset':
        """Create and persist a new asset with one empty default locale."""
        pass

    @abstractmethod
    def delete_asset(self, asset: 'LocalizedAsset') -> bool:
        pass

    @abstractmethod
    def save_dirty(self) -> int:
        """Write every dirty asset. Returns the number of assets written."""
        pass
