"""Basin kinds and faucet placement tags."""

from __future__ import annotations

from enum import Enum


class BasinKind(str, Enum):
    """User-facing basin types offered by the configurator.

    Attributes:
        E_SINK: Electronic sink basin.
        E_SINK_DI: Electronic sink basin fed with deionized water. Always
            requires a DI gooseneck faucet.
        E_DRAIN: Electronic drain basin. Faucets may only sit between basins,
            never centered on an E-Drain basin.
    """

    E_SINK = "E_SINK"
    E_SINK_DI = "E_SINK_DI"
    E_DRAIN = "E_DRAIN"


# Size id that requests a synthesized custom basin
CUSTOM_SIZE = "CUSTOM"

# Placement tag prefixes
CENTER_PREFIX = "BASIN_"
BETWEEN_PREFIX = "BETWEEN_"


def center_placement(basin_number: int) -> str:
    """Placement tag for the center of a basin (1-based)."""
    return f"{CENTER_PREFIX}{basin_number}"


def between_placement(basin_number: int) -> str:
    """Placement tag between basin ``basin_number`` and the next one (1-based)."""
    return f"{BETWEEN_PREFIX}{basin_number}_{basin_number + 1}"


def placement_label(placement: str | None) -> str:
    """Human-readable label for a placement tag.

    Examples:
        >>> placement_label("BASIN_2")
        'Center of Basin 2'
        >>> placement_label("BETWEEN_1_2")
        'Between Basin 1 & 2'
    """
    if not placement:
        return "Unplaced"
    if placement.startswith(CENTER_PREFIX):
        return f"Center of Basin {placement[len(CENTER_PREFIX):]}"
    if placement.startswith(BETWEEN_PREFIX):
        left, _, right = placement[len(BETWEEN_PREFIX):].partition("_")
        return f"Between Basin {left} & {right}"
    return placement
