"""Semantic categories used to group BOM items."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """Top-level BOM item categories.

    Consumers use these to group items in previews, to filter exports and to
    pick procurement-relevant subsets.
    """

    SYSTEM = "SYSTEM"
    SINK_BODY = "SINK_BODY"
    BASIN = "BASIN"
    FAUCET_SPRAYER = "FAUCET_SPRAYER"
    CONTROL_BOX = "CONTROL_BOX"
    ACCESSORY = "ACCESSORY"
    SERVICE_PART = "SERVICE_PART"
    OTHER = "OTHER"


class AccessoryKind(str, Enum):
    """Sub-kinds for items in the ACCESSORY category."""

    STORAGE = "STORAGE"
    LIGHTING = "LIGHTING"
    ORGANIZATION = "ORGANIZATION"
    DISPENSERS = "DISPENSERS"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Classification:
    """Result of categorizing one BOM item.

    Attributes:
        category: Top-level category.
        accessory_kind: Sub-kind, only set when category is ACCESSORY.
    """

    category: Category
    accessory_kind: AccessoryKind | None = None

    def __post_init__(self) -> None:
        if self.accessory_kind is not None and self.category is not Category.ACCESSORY:
            raise ValueError("accessory_kind is only valid for ACCESSORY items")

    @property
    def label(self) -> str:
        """Slash-joined label such as ``ACCESSORY/STORAGE``."""
        if self.accessory_kind is None:
            return self.category.value
        return f"{self.category.value}/{self.accessory_kind.value}"

    @classmethod
    def parse(cls, value: "str | Classification") -> "Classification":
        """Build a classification from a label like ``ACCESSORY/LIGHTING``.

        A bare ``ACCESSORY`` label maps to the OTHER accessory sub-kind.

        Raises:
            ValueError: If the label names an unknown category or sub-kind.
        """
        if isinstance(value, Classification):
            return value
        head, _, tail = value.strip().upper().partition("/")
        category = Category(head)
        if category is Category.ACCESSORY:
            return cls(category, AccessoryKind(tail) if tail else AccessoryKind.OTHER)
        if tail:
            raise ValueError(f"Category '{head}' has no sub-kinds (got '{value}')")
        return cls(category)

    def __str__(self) -> str:
        return self.label


OTHER = Classification(Category.OTHER)
