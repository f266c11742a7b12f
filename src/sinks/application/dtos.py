"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sinks.domain import (
    AccessorySelection,
    BOMNode,
    Category,
    Configuration,
    ResolutionWarning,
    RuleRepair,
)


@dataclass(frozen=True)
class MissingField:
    """A mandatory configuration facet that is still absent.

    Attributes:
        path: Configuration path (``sinkModelId``, ``basins[1].basinTypeId``).
        label: Human-readable label to present to the user.
    """

    path: str
    label: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "label": self.label}


@dataclass
class OrderInput:
    """Input DTO for a multi-build order.

    Attributes:
        build_numbers: Builds in compilation order.
        configurations: Configuration per build number.
        accessories: Accessory selections per build number.
        language: Manual language code.
    """

    build_numbers: list[str]
    configurations: dict[str, Configuration] = field(default_factory=dict)
    accessories: dict[str, list[AccessorySelection]] = field(default_factory=dict)
    language: str = "EN"

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not self.build_numbers:
            errors.append("Order must contain at least one build number")
        if len(set(self.build_numbers)) != len(self.build_numbers):
            errors.append("Build numbers must be unique")
        unknown = sorted(set(self.configurations) - set(self.build_numbers))
        if unknown:
            errors.append(f"Configurations for unknown build numbers: {', '.join(unknown)}")
        return errors


@dataclass
class BomResult:
    """Output DTO for a BOM compilation.

    Attributes:
        hierarchical: Top-level nodes with nested children, merged one level.
        flattened: One categorized node per identifier, quantities summed.
        missing_fields: Mandatory facets still absent; the BOM is partial
            when this is non-empty.
        warnings: Resolution warnings collected during compilation.
        repairs: Changes made by the rule engine.
        configuration: The rule-validated configuration the BOM was built
            from (None for orders).
    """

    hierarchical: list[BOMNode] = field(default_factory=list)
    flattened: list[BOMNode] = field(default_factory=list)
    missing_fields: list[MissingField] = field(default_factory=list)
    warnings: list[ResolutionWarning] = field(default_factory=list)
    repairs: list[RuleRepair] = field(default_factory=list)
    configuration: Configuration | None = None

    @property
    def total_items(self) -> int:
        return len(self.flattened)

    @property
    def top_level_items(self) -> int:
        return len(self.hierarchical)

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields

    def items_in(self, category: Category) -> list[BOMNode]:
        """Flattened nodes whose classification falls under ``category``."""
        return [node for node in self.flattened if node.category and node.category.category is category]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase result record."""
        return {
            "hierarchical": [node.to_dict() for node in self.hierarchical],
            "flattened": [node.to_dict() for node in self.flattened],
            "totalItems": self.total_items,
            "topLevelItems": self.top_level_items,
            "missingFields": [missing.to_dict() for missing in self.missing_fields],
            "warnings": [warning.to_dict() for warning in self.warnings],
            "repairs": [repair.to_dict() for repair in self.repairs],
        }
