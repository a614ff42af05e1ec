"""
Core domain models for the product hierarchy filter.

These are pure data structures without business logic.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .constants import LEVEL_DISPLAY_NAMES


class Level(str, Enum):
    """One of the four fixed ranks of the product hierarchy."""
    CATEGORY = 'category'
    SUBCATEGORY = 'subcategory'
    CLASS = 'class'
    PRODUCT = 'product'

    @property
    def rank(self) -> int:
        """Position in the hierarchy (0 = category)."""
        return list(Level).index(self)


def _clean(value: Any) -> Optional[str]:
    """Coerce a raw column value to a stripped string, or None when blank."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass
class FlatRecord:
    """One denormalized catalog row (one product)."""
    product_id: Optional[str]
    product_name: Optional[str]
    category_name: Optional[str]
    subcategory_name: Optional[str] = None
    class_name: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> 'FlatRecord':
        """
        Build a record from a database row or dict.

        Missing keys and empty strings become None; numeric ids become strings.
        """
        return cls(
            product_id=_clean(row.get('product_id')),
            product_name=_clean(row.get('product_name')),
            category_name=_clean(row.get('category_name')),
            subcategory_name=_clean(row.get('subcategory_name')),
            class_name=_clean(row.get('class_name')),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'product_id': self.product_id,
            'product_name': self.product_name,
            'category_name': self.category_name,
            'subcategory_name': self.subcategory_name,
            'class_name': self.class_name,
        }


@dataclass
class SelectedFilter:
    """
    Canonical, level-bounded selection.

    Fields deeper than ``level`` stay None even when they could be derived.
    """
    level: Level
    category_id: str
    category_name: str
    subcategory_id: Optional[str] = None
    subcategory_name: Optional[str] = None
    class_id: Optional[str] = None
    class_name: Optional[str] = None
    product_id: Optional[str] = None
    product_name: Optional[str] = None

    @property
    def label(self) -> str:
        """Text for the active filter chip."""
        if self.level == Level.PRODUCT:
            return ' - '.join(part for part in (self.product_id, self.product_name) if part)
        name = getattr(self, f"{self.level.value}_name")
        return f"{name} ({LEVEL_DISPLAY_NAMES[self.level.value]})"

    def to_dict(self) -> dict:
        """Convert to dictionary, dropping unset fields."""
        result: Dict[str, Any] = {'level': self.level.value}
        for name in (
            'category_id', 'category_name',
            'subcategory_id', 'subcategory_name',
            'class_id', 'class_name',
            'product_id', 'product_name',
        ):
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        return result


@dataclass
class HierarchyNode:
    """A node of the built product forest."""
    id: str
    name: str
    level: Level
    data: SelectedFilter
    children: List['HierarchyNode'] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return not self.children

    def to_dict(self) -> dict:
        """Convert to nested dictionary; empty children are omitted."""
        result = {
            'id': self.id,
            'name': self.name,
            'level': self.level.value,
            'data': self.data.to_dict(),
        }
        if self.children:
            result['children'] = [child.to_dict() for child in self.children]
        return result
