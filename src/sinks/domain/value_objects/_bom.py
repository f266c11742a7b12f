"""Bill of materials node."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterator

from ._categories import Classification


@dataclass(frozen=True)
class BOMNode:
    """One part or assembly in a compiled bill of materials.

    Nodes are immutable; every compilation derives a fresh tree from a
    configuration snapshot. Child quantities are absolute, i.e. already
    multiplied by the quantity of their parent.

    Attributes:
        id: Resolved catalog identifier (or a pass-through value when the
            identifier could not be resolved).
        name: Display name.
        quantity: Positive number of units required.
        category: Classification, or None before categorization.
        children: Nested sub-kits and parts.
        source_contexts: Provenance tags of the configuration facets that
            contributed this node.
        part_number: Numeric catalog code (e.g. ``711.97``), if known.
        is_placeholder: True when the identifier was not found in the catalog.
        is_custom: True for synthesized custom parts (custom basins).
    """

    id: str
    name: str
    quantity: int = 1
    category: Classification | None = None
    children: tuple["BOMNode", ...] = field(default_factory=tuple)
    source_contexts: tuple[str, ...] = field(default_factory=tuple)
    part_number: str | None = None
    is_placeholder: bool = False
    is_custom: bool = False

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"BOM node '{self.id}' quantity must be positive, got {self.quantity}")

    @property
    def merge_key(self) -> tuple[str, str]:
        """Key used to reconcile duplicates contributed by different facets."""
        return (self.id, self.name)

    @property
    def source_count(self) -> int:
        """Number of provenance entries recorded for this node."""
        return len(self.source_contexts)

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    def with_category(self, category: Classification) -> "BOMNode":
        return replace(self, category=category)

    def walk(self) -> Iterator["BOMNode"]:
        """Yield this node and all descendants, depth-first pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "partNumber": self.part_number,
            "name": self.name,
            "quantity": self.quantity,
            "category": self.category.label if self.category else None,
            "children": [child.to_dict() for child in self.children],
            "sourceContexts": list(self.source_contexts),
            "isPlaceholder": self.is_placeholder,
            "isCustom": self.is_custom,
        }
