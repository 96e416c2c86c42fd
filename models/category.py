"""Category model for transaction categorization."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CategoryType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Category:
    """Represents a transaction category.

    Attributes:
        id: Unique identifier (assigned by the category service).
        name: Category name, unique within its type.
        type: Whether the category groups income or expenses. "Groceries"
            under expense and "Groceries" under income are different categories.
        icon: Icon reference used by the presentation layer.
        color: Hex color used in breakdown charts.
    """

    id: int
    name: str
    type: CategoryType
    icon: str = "Tag"
    color: str = "#6B7280"

    def to_dict(self) -> dict:
        """Convert category to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "icon": self.icon,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        """Build a category from a seed record."""
        return cls(
            id=int(data["id"]),
            name=data["name"],
            type=CategoryType(data["type"]),
            icon=data.get("icon") or "Tag",
            color=data.get("color") or "#6B7280",
        )


@dataclass(frozen=True)
class CategoryUpdate:
    """Mutable category fields. Fields left as None are not changed."""

    name: Optional[str] = None
    type: Optional[CategoryType] = None
    icon: Optional[str] = None
    color: Optional[str] = None
