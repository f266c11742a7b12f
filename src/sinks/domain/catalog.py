"""Lookup tables shared by every stage of BOM compilation.

The tables are plain immutable data: catalog items with their nested
components, sink models, basin mappings, coverage ranges for pegboards and
sink bodies, and the declarative categorization records. They are loaded once
by the caller (see ``sinks.application.catalog``) and passed into each pure
function. Every section may be empty; lookups against missing sections fall
back to pass-through behavior rather than raising.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .value_objects import BasinKind, Classification

# Leading numeric part-number code such as "711.97" or "702.10"
PART_NUMBER_PREFIX = re.compile(r"^(\d{3})\.(\d+)")

_BASIN_KINDS = frozenset(kind.value for kind in BasinKind)


def parse_part_number(value: str | None) -> tuple[int, int] | None:
    """Extract ``(major, minor)`` from a leading ``ddd.n`` code.

    Examples:
        >>> parse_part_number("711.97")
        (711, 97)
        >>> parse_part_number("720.215.001")
        (720, 215)
        >>> parse_part_number("T2-BODY-48-60-HA") is None
        True
    """
    if not value:
        return None
    match = PART_NUMBER_PREFIX.match(value.strip())
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


@dataclass(frozen=True)
class CatalogComponent:
    """A child reference inside a catalog assembly."""

    id: str
    quantity: int = 1


@dataclass(frozen=True)
class CatalogItem:
    """A purchasable or manufacturable catalog entry.

    Attributes:
        id: Catalog identifier (``T2-BSN-ESK-KIT``).
        name: Display name.
        part_number: Numeric catalog code (``713.107``), if any.
        category: Explicit category label (``BASIN``, ``ACCESSORY/LIGHTING``).
        components: Nested sub-kits and parts, each with a per-unit quantity.
    """

    id: str
    name: str
    part_number: str | None = None
    category: Classification | None = None
    components: tuple[CatalogComponent, ...] = field(default_factory=tuple)

    @property
    def is_assembly(self) -> bool:
        return len(self.components) > 0


@dataclass(frozen=True)
class SinkModel:
    id: str
    name: str
    basin_count: int


@dataclass(frozen=True)
class CoverageRange:
    """Inclusive length range mapped to a key (pegboard size, sink body id)."""

    key: str
    low: float
    high: float

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


@dataclass(frozen=True)
class CategoryRange:
    """Inclusive part-number range for one classification.

    ``low``/``high`` bound the minor code; when both are None every minor code
    under ``major`` matches (``702.*``).
    """

    major: int
    classification: Classification
    low: int | None = None
    high: int | None = None

    def matches(self, code: tuple[int, int]) -> bool:
        major, minor = code
        if major != self.major:
            return False
        if self.low is not None and minor < self.low:
            return False
        if self.high is not None and minor > self.high:
            return False
        return True


@dataclass(frozen=True)
class KeywordRule:
    """Substring heuristic mapping id or name fragments to a classification.

    Fragments are compared case-insensitively. ``id_prefixes`` must match the
    start of the identifier; ``id_contains`` and ``name_contains`` may match
    anywhere. When ``within`` is set the identifier must also start with one
    of its prefixes; a rule with ``within`` and no fragments matches every
    identifier in that scope.
    """

    classification: Classification
    id_prefixes: tuple[str, ...] = ()
    id_contains: tuple[str, ...] = ()
    name_contains: tuple[str, ...] = ()
    within: tuple[str, ...] = ()

    def matches(self, item_id: str, name: str) -> bool:
        item_id = item_id.lower()
        name = name.lower()
        if self.within and not any(item_id.startswith(scope) for scope in self.within):
            return False
        if not (self.id_prefixes or self.id_contains or self.name_contains):
            return bool(self.within)
        return (
            any(item_id.startswith(p) for p in self.id_prefixes)
            or any(fragment in item_id for fragment in self.id_contains)
            or any(fragment in name for fragment in self.name_contains)
        )


def _frozen(mapping: Mapping | None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class LookupTables:
    """All static data needed to compile a configuration.

    Attributes:
        items: Catalog items keyed by identifier.
        sink_models: Sink models keyed by model id (``T2-B2``).
        basin_types: Basin kind to basin kit id.
        basin_sizes: Size id (``24X20X10``) to canonical basin assembly id.
        basin_size_aliases: Legacy codes (``712.104``) to canonical assembly id.
        custom_basin_part_number: Placeholder part number for custom basins.
        pegboard_coverage: Ascending inclusive ranges of sink length per
            pegboard size bucket.
        pegboard_colors: Known pegboard color codes.
        sink_bodies: Ascending inclusive ranges of sink length per sink body.
        control_boxes: Control box ids keyed by board code (``EDR1-ESK1``).
        faucet_types: Faucet aliases to faucet kit ids.
        sprayer_types: Sprayer aliases to sprayer kit ids.
        manual_kits: Language code to manual kit id.
        di_faucet_id: Faucet kit required by E_SINK_DI basins.
        overhead_light_kit_id: Kit mandatory whenever a pegboard is fitted.
        pegboard_color_kit_id: Color sub-kit nested under pegboard kits.
        category_ranges: Part-number ranges per classification.
        keyword_rules: Ordered keyword heuristics, first match wins.
    """

    items: Mapping[str, CatalogItem] = field(default_factory=dict)
    sink_models: Mapping[str, SinkModel] = field(default_factory=dict)
    basin_types: Mapping[str, str] = field(default_factory=dict)
    basin_sizes: Mapping[str, str] = field(default_factory=dict)
    basin_size_aliases: Mapping[str, str] = field(default_factory=dict)
    custom_basin_part_number: str = "720.215.001"
    pegboard_coverage: tuple[CoverageRange, ...] = ()
    pegboard_colors: tuple[str, ...] = ()
    sink_bodies: tuple[CoverageRange, ...] = ()
    control_boxes: Mapping[str, str] = field(default_factory=dict)
    faucet_types: Mapping[str, str] = field(default_factory=dict)
    sprayer_types: Mapping[str, str] = field(default_factory=dict)
    manual_kits: Mapping[str, str] = field(default_factory=dict)
    di_faucet_id: str = "T2-OA-DI-GOOSENECK-FAUCET-KIT"
    overhead_light_kit_id: str = "T2-OHL-MDRD-KIT"
    pegboard_color_kit_id: str = "T-OA-PB-COLOR"
    category_ranges: tuple[CategoryRange, ...] = ()
    keyword_rules: tuple[KeywordRule, ...] = ()

    def __post_init__(self) -> None:
        # Read-only views so tables can be shared between compilations
        for name in (
            "items",
            "sink_models",
            "basin_types",
            "basin_sizes",
            "basin_size_aliases",
            "control_boxes",
            "faucet_types",
            "sprayer_types",
            "manual_kits",
        ):
            object.__setattr__(self, name, _frozen(getattr(self, name)))
        object.__setattr__(
            self,
            "pegboard_coverage",
            tuple(sorted(self.pegboard_coverage, key=lambda r: (r.high, r.low))),
        )
        object.__setattr__(
            self,
            "sink_bodies",
            tuple(sorted(self.sink_bodies, key=lambda r: (r.low, r.high))),
        )

    def item(self, item_id: str) -> CatalogItem | None:
        return self.items.get(item_id)

    def has_item(self, item_id: str) -> bool:
        return item_id in self.items

    def sink_model(self, model_id: str | None) -> SinkModel | None:
        if not model_id:
            return None
        return self.sink_models.get(model_id)

    def basin_capacity(self, model_id: str | None) -> int | None:
        """Fixed basin count of a sink model, or None when unknown."""
        model = self.sink_model(model_id)
        return model.basin_count if model else None

    def basin_kind_of(self, type_id: str | None) -> str | None:
        """Reverse-map a basin type or kit id to its kind (``E_DRAIN``).

        Returns None for empty values and for kit ids not in the table.
        """
        if not type_id:
            return None
        if type_id in self.basin_types or type_id in _BASIN_KINDS:
            return type_id
        for kind, kit_id in self.basin_types.items():
            if kit_id == type_id:
                return kind
        return None

    def coverage_for(self, ranges: tuple[CoverageRange, ...], value: float) -> CoverageRange | None:
        """First range containing ``value``; None when nothing contains it or NaN."""
        if value is None or math.isnan(value):
            return None
        for entry in ranges:
            if entry.contains(value):
                return entry
        return None

    @property
    def is_empty(self) -> bool:
        return not self.items and not self.sink_models


EMPTY_TABLES = LookupTables()
