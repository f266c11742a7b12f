"""Resolution of user-facing selections into catalog identifiers.

Every function here is pure with respect to its inputs: the same selection and
lookup tables always produce the same identifier. Unresolvable values never
abort resolution; they pass through unchanged and a ``ResolutionWarning`` is
logged and collected for the caller.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any

from ..catalog import LookupTables
from ..entities import BasinConfig, Configuration
from ..value_objects import CUSTOM_SIZE, BasinKind

logger = logging.getLogger(__name__)

BASIN_KIT_PREFIX = "T2-BSN-"
CUSTOM_BASIN_PREFIX = "T2-ADW-BASIN-"
PEGBOARD_PREFIX = "T2-ADW-PB-"
PEGBOARD_COLOR_PREFIX = "T-OA-PB-COLOR-"

_RAW_DIMENSIONS = re.compile(r"^(\d+(?:\.\d+)?)X(\d+(?:\.\d+)?)X(\d+(?:\.\d+)?)$")
_PEGBOARD_KIT = re.compile(r"^T2-ADW-PB-(\d{4,5})(?:-([A-Z0-9]+))?-(PERF|SOLID)-KIT$")


@dataclass(frozen=True)
class ResolutionWarning:
    """Non-fatal notice that a value could not be resolved.

    Attributes:
        field: Configuration path of the offending value (``basins[0].typeId``).
        value: The value that was passed through.
        message: Human-readable description.
    """

    field: str
    value: str | None
    message: str

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "value": self.value, "message": self.message}


def _warn(
    warnings: list[ResolutionWarning] | None,
    field_path: str,
    value: Any,
    message: str,
) -> None:
    logger.warning(message)
    if warnings is not None:
        warnings.append(ResolutionWarning(field_path, None if value is None else str(value), message))


# --- Basins ---


def resolve_basin_type(
    value: str | None,
    tables: LookupTables,
    warnings: list[ResolutionWarning] | None = None,
    field_path: str = "basinTypeId",
) -> str | None:
    """Map a basin kind to its kit id.

    Values already in resolved form pass through unchanged, so applying the
    function twice yields the same result as applying it once. Unknown values
    pass through with a warning.

    Examples:
        E_SINK -> T2-BSN-ESK-KIT
        E_SINK_DI -> T2-BSN-ESK-DI-KIT
        T2-BSN-EDR-KIT -> T2-BSN-EDR-KIT

    Args:
        value: Basin kind, kit id or legacy identifier.
        tables: Lookup tables holding the basin kind map.
        warnings: Collector for unresolvable values, if given.
        field_path: Configuration path reported with a warning.

    Returns:
        The kit id, or ``value`` itself when it is empty or unknown.
    """
    if not value:
        return value
    if value in tables.basin_types:
        return tables.basin_types[value]
    if value in tables.basin_types.values() or value.startswith(BASIN_KIT_PREFIX):
        return value
    _warn(warnings, field_path, value, f"Unknown basin type '{value}', passing through")
    return value


@dataclass(frozen=True)
class ResolvedBasinSize:
    """Catalog identity of a basin size selection.

    Attributes:
        id: Canonical assembly id, synthesized custom id, or pass-through value.
        part_number: Catalog code, or the custom placeholder part number.
        name: Display name for synthesized parts, None for catalog parts.
        is_custom: True when synthesized from custom dimensions.
    """

    id: str
    part_number: str | None = None
    name: str | None = None
    is_custom: bool = False


def format_dimension(value: float) -> str:
    """Format one custom dimension deterministically.

    Integral values drop their decimals so ``24``, ``24.0`` and ``"24"`` all
    encode identically.
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:g}"


def custom_basin_size(
    width: float, length: float, depth: float, tables: LookupTables
) -> ResolvedBasinSize:
    """Synthesize the identity of a custom basin.

    Example:
        (32, 22, 10) -> T2-ADW-BASIN-32X22X10, part number 720.215.001
    """
    dims = "X".join(format_dimension(v) for v in (width, length, depth))
    return ResolvedBasinSize(
        id=f"{CUSTOM_BASIN_PREFIX}{dims}",
        part_number=tables.custom_basin_part_number,
        name=f"Custom Basin {dims}",
        is_custom=True,
    )


def _catalog_size(canonical_id: str, tables: LookupTables) -> ResolvedBasinSize:
    item = tables.item(canonical_id)
    return ResolvedBasinSize(id=canonical_id, part_number=item.part_number if item else None)


def resolve_basin_size(
    basin: BasinConfig,
    tables: LookupTables,
    warnings: list[ResolutionWarning] | None = None,
    field_path: str = "basinSizePartNumber",
) -> ResolvedBasinSize | None:
    """Resolve a basin size selection to a canonical or synthesized part.

    Lookup order: direct size table, legacy alias table, canonical ids,
    raw ``WxLxD`` strings, already-synthesized custom ids. ``CUSTOM`` uses the
    basin's custom dimensions and yields None (with a warning) when any of
    them is missing.

    Args:
        basin: Basin whose ``size_id`` and custom dimensions are resolved.
        tables: Lookup tables with the size and alias maps.
        warnings: Collector for unresolvable sizes, if given.
        field_path: Configuration path reported with a warning.

    Returns:
        The resolved size, or None when no size is selected or a custom
        size is incomplete. Unknown sizes pass through as their raw value.
    """
    size = basin.size_id
    if not size:
        return None
    raw = size.strip()
    upper = raw.upper()

    if upper == CUSTOM_SIZE:
        dims = (basin.custom_width, basin.custom_length, basin.custom_depth)
        if any(d is None or d <= 0 for d in dims):
            _warn(warnings, field_path, raw, "Custom basin size requires width, length and depth")
            return None
        return custom_basin_size(*dims, tables)

    if upper in tables.basin_sizes:
        return _catalog_size(tables.basin_sizes[upper], tables)
    for key in (raw, upper):
        if key in tables.basin_size_aliases:
            return _catalog_size(tables.basin_size_aliases[key], tables)
    if upper in tables.basin_sizes.values():
        return _catalog_size(upper, tables)

    match = _RAW_DIMENSIONS.match(upper)
    if match:
        width, length, depth = (float(g) for g in match.groups())
        return custom_basin_size(width, length, depth, tables)

    # Already-synthesized ids, optionally carrying the placeholder part number
    marker = upper.find(CUSTOM_BASIN_PREFIX)
    if marker >= 0:
        match = _RAW_DIMENSIONS.match(upper[marker + len(CUSTOM_BASIN_PREFIX):])
        if match:
            width, length, depth = (float(g) for g in match.groups())
            return custom_basin_size(width, length, depth, tables)

    _warn(warnings, field_path, raw, f"Unknown basin size '{raw}', passing through")
    return ResolvedBasinSize(id=raw)


# --- Pegboard ---


def resolve_pegboard_color(color_id: str | None) -> str | None:
    """Reduce a color option to its bare color code.

    Examples:
        >>> resolve_pegboard_color("T-OA-PB-COLOR-BLUE")
        'BLUE'
        >>> resolve_pegboard_color("green")
        'GREEN'
    """
    if not color_id:
        return None
    code = color_id.strip().upper()
    if code.startswith(PEGBOARD_COLOR_PREFIX):
        code = code[len(PEGBOARD_COLOR_PREFIX):]
    return code or None


def pegboard_type_code(pegboard_type: str | None) -> str:
    """PERF for perforated pegboards, SOLID for anything else."""
    if pegboard_type and pegboard_type.strip().upper() in ("PERFORATED", "PERF"):
        return "PERF"
    return "SOLID"


def _as_length(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def pegboard_bucket(sink_length: Any, tables: LookupTables) -> str | None:
    """Pegboard size bucket (``6036``) covering a sink length.

    Picks the first bucket, in ascending order of upper bound, whose upper
    bound covers the length. Lengths above every bucket, and non-numeric
    lengths, clamp to the largest bucket. Returns None only when the tables
    have no coverage data.
    """
    coverage = tables.pegboard_coverage
    if not coverage:
        return None
    length = _as_length(sink_length)
    if math.isnan(length):
        return coverage[-1].key
    for entry in coverage:
        if length <= entry.high:
            return entry.key
    return coverage[-1].key


def resolve_pegboard_kit(
    sink_length: Any,
    pegboard_type: str | None,
    color: str | None,
    tables: LookupTables,
) -> str:
    """Compose the pegboard kit id for a sink length, type and color.

    Examples:
        (60, "PERFORATED", "BLUE") -> T2-ADW-PB-6036-BLUE-PERF-KIT
        (50, "SOLID", None) -> T2-ADW-PB-4836-SOLID-KIT

    Never raises. Without coverage data the generic kit for the type is
    returned.
    """
    type_code = pegboard_type_code(pegboard_type)
    bucket = pegboard_bucket(sink_length, tables)
    if bucket is None:
        return f"{PEGBOARD_PREFIX}{type_code}-KIT"
    color_code = resolve_pegboard_color(color)
    if color_code:
        return f"{PEGBOARD_PREFIX}{bucket}-{color_code}-{type_code}-KIT"
    return f"{PEGBOARD_PREFIX}{bucket}-{type_code}-KIT"


def pegboard_size_id(bucket: str) -> str:
    """Size assembly id nested under a pegboard kit (``T2-ADW-PB-6036``)."""
    return f"{PEGBOARD_PREFIX}{bucket}"


# --- Sink body and control box ---


def resolve_sink_body(
    length: Any,
    tables: LookupTables,
    warnings: list[ResolutionWarning] | None = None,
) -> str | None:
    """Select the sink body assembly whose length range covers ``length``.

    Args:
        length: Sink length in inches; numeric strings are accepted.
        tables: Lookup tables with the sink body ranges.
        warnings: Collector for uncovered lengths, if given.

    Returns:
        The sink body id. None for a missing length, and None plus a warning
        for a length outside every range.
    """
    if length is None:
        return None
    entry = tables.coverage_for(tables.sink_bodies, _as_length(length))
    if entry is None:
        _warn(warnings, "length", length, f"No sink body assembly covers length {length}")
        return None
    return entry.key


def control_box_code(edrain_count: int, esink_count: int) -> str:
    """Board code such as ``EDR1-ESK2`` for the given basin counts."""
    parts = []
    if edrain_count:
        parts.append(f"EDR{edrain_count}")
    if esink_count:
        parts.append(f"ESK{esink_count}")
    return "-".join(parts)


def resolve_control_box(basins: list[BasinConfig], tables: LookupTables) -> str | None:
    """Auto-select a control box from the basin composition.

    E_SINK_DI basins count as E-Sinks. Returns None when any basin is untyped
    or no control box exists for the combination.
    """
    edrain = esink = 0
    for basin in basins:
        kind = tables.basin_kind_of(basin.type_id)
        if kind == BasinKind.E_DRAIN.value:
            edrain += 1
        elif kind in (BasinKind.E_SINK.value, BasinKind.E_SINK_DI.value):
            esink += 1
        else:
            return None
    if not edrain and not esink:
        return None
    return tables.control_boxes.get(control_box_code(edrain, esink))


def is_control_box_ready(config: Configuration, tables: LookupTables) -> bool:
    """True when model, basin types and basin count are all settled."""
    if not config.sink_model_id or not config.basins:
        return False
    if any(basin.is_empty for basin in config.basins):
        return False
    capacity = tables.basin_capacity(config.sink_model_id)
    return capacity is None or len(config.basins) >= capacity


# --- Whole configuration ---


def _resolve_option(
    value: str,
    aliases: dict[str, str] | Any,
    tables: LookupTables,
    field_path: str,
    warnings: list[ResolutionWarning],
) -> str:
    if value in aliases:
        return aliases[value]
    if value.upper() in aliases:
        return aliases[value.upper()]
    if value in aliases.values() or tables.has_item(value) or not tables.items:
        return value
    _warn(warnings, field_path, value, f"Unknown option '{value}' at {field_path}, passing through")
    return value


@dataclass(frozen=True)
class ResolvedPegboard:
    """Pegboard selection resolved to catalog ids.

    ``size_id`` and ``color_code`` are None when the kit is the generic
    type-only kit.
    """

    kit_id: str
    type_code: str
    size_id: str | None = None
    color_code: str | None = None


def parse_pegboard_kit(kit_id: str) -> ResolvedPegboard | None:
    """Recover the size bucket, color and type from a composed pegboard kit id.

    Args:
        kit_id: Identifier such as ``T2-ADW-PB-6036-BLUE-PERF-KIT``.

    Returns:
        The resolved pegboard, or None when ``kit_id`` is not a sized
        pegboard kit.

    Example:
        >>> parse_pegboard_kit("T2-ADW-PB-4836-SOLID-KIT").size_id
        'T2-ADW-PB-4836'
    """
    match = _PEGBOARD_KIT.match(kit_id)
    if match is None:
        return None
    bucket, color_code, type_code = match.groups()
    return ResolvedPegboard(
        kit_id=kit_id,
        type_code=type_code,
        size_id=pegboard_size_id(bucket),
        color_code=color_code,
    )


@dataclass(frozen=True)
class ResolvedBasin:
    number: int
    type_id: str | None
    kind: str | None
    size: ResolvedBasinSize | None
    addon_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolvedFaucet:
    type_id: str
    quantity: int = 1
    placement: str | None = None
    mandatory: bool = False


@dataclass(frozen=True)
class ResolvedConfiguration:
    """A rule-validated configuration with every selection mapped to ids."""

    configuration: Configuration
    sink_body_id: str | None = None
    legs_id: str | None = None
    feet_id: str | None = None
    pegboard: ResolvedPegboard | None = None
    drawer_ids: tuple[str, ...] = ()
    basins: tuple[ResolvedBasin, ...] = ()
    faucets: tuple[ResolvedFaucet, ...] = ()
    sprayer_ids: tuple[str, ...] = ()
    control_box_id: str | None = None
    accessories: tuple[tuple[str, int], ...] = ()
    warnings: tuple[ResolutionWarning, ...] = field(default_factory=tuple)


def _resolve_pegboard(
    config: Configuration, tables: LookupTables, warnings: list[ResolutionWarning]
) -> ResolvedPegboard | None:
    pegboard = config.pegboard
    if not pegboard.enabled:
        return None
    type_code = pegboard_type_code(pegboard.type_id)
    if config.length is None:
        _warn(warnings, "pegboard", None, "Sink length missing, using generic pegboard kit")
        return ResolvedPegboard(kit_id=f"{PEGBOARD_PREFIX}{type_code}-KIT", type_code=type_code)
    bucket = pegboard_bucket(config.length, tables)
    color_code = resolve_pegboard_color(pegboard.color_id)
    if color_code and tables.pegboard_colors and color_code not in tables.pegboard_colors:
        _warn(warnings, "pegboard.colorId", pegboard.color_id, f"Unknown pegboard color '{pegboard.color_id}'")
    return ResolvedPegboard(
        kit_id=resolve_pegboard_kit(config.length, pegboard.type_id, color_code, tables),
        type_code=type_code,
        size_id=pegboard_size_id(bucket) if bucket else None,
        color_code=color_code,
    )


def resolve_configuration(config: Configuration, tables: LookupTables) -> ResolvedConfiguration:
    """Resolve every selection of a (rule-validated) configuration snapshot.

    Args:
        config: Snapshot that has already been through ``apply_rules``.
        tables: Lookup tables used for every identifier.

    Returns:
        The resolved configuration. Unresolvable selections pass through
        and are listed in its ``warnings``; this function never raises.
    """
    warnings: list[ResolutionWarning] = []

    basins = []
    for index, basin in enumerate(config.basins):
        path = f"basins[{index}]"
        type_id = resolve_basin_type(basin.type_id, tables, warnings, f"{path}.basinTypeId")
        basins.append(
            ResolvedBasin(
                number=index + 1,
                type_id=type_id,
                kind=tables.basin_kind_of(type_id),
                size=resolve_basin_size(basin, tables, warnings, f"{path}.basinSizePartNumber"),
                addon_ids=tuple(basin.addon_ids),
            )
        )

    faucets = tuple(
        ResolvedFaucet(
            type_id=_resolve_option(f.type_id, tables.faucet_types, tables, f"faucets[{i}].faucetTypeId", warnings),
            quantity=max(f.quantity, 1),
            placement=f.placement,
            mandatory=f.mandatory,
        )
        for i, f in enumerate(config.faucets)
        if f.type_id
    )
    sprayer_ids = tuple(
        _resolve_option(s.type_id, tables.sprayer_types, tables, f"sprayers[{i}].sprayerTypeId", warnings)
        for i, s in enumerate(config.sprayers)
        if s.type_id
    )

    control_box_id = None
    if is_control_box_ready(config, tables):
        control_box_id = config.control_box_id or resolve_control_box(config.basins, tables)
        if control_box_id is None:
            _warn(warnings, "controlBoxId", None, "No control box matches the basin composition")

    resolved = ResolvedConfiguration(
        configuration=config,
        sink_body_id=resolve_sink_body(config.length, tables, warnings),
        legs_id=config.legs_type_id or None,
        feet_id=config.feet_type_id or None,
        pegboard=_resolve_pegboard(config, tables, warnings),
        drawer_ids=tuple(d for d in config.drawer_item_ids if d),
        basins=tuple(basins),
        faucets=faucets,
        sprayer_ids=sprayer_ids,
        control_box_id=control_box_id,
        accessories=tuple((a.id, a.quantity) for a in config.accessories if a.id and a.quantity > 0),
        warnings=tuple(warnings),
    )
    logger.debug(
        f"Resolved configuration: {len(resolved.basins)} basins, "
        f"{len(resolved.faucets)} faucets, {len(resolved.warnings)} warnings"
    )
    return resolved
