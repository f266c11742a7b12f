"""Mutable configuration records for a single build.

A ``Configuration`` is created empty, edited incrementally by the caller and
snapshotted before every compilation. The compilation pipeline only ever sees
snapshots; it never mutates the caller's instance.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field


@dataclass
class BasinConfig:
    """One basin slot.

    Attributes:
        type_id: E_SINK, E_SINK_DI, E_DRAIN or an already-resolved kit id.
            None while the slot is still empty.
        size_id: Catalog size id (``24X20X10``), legacy alias, canonical
            assembly id, or ``CUSTOM``.
        custom_width: Custom basin width in inches (CUSTOM only).
        custom_length: Custom basin length in inches (CUSTOM only).
        custom_depth: Custom basin depth in inches (CUSTOM only).
        addon_ids: Basin add-on kit ids.
    """

    type_id: str | None = None
    size_id: str | None = None
    custom_width: float | None = None
    custom_length: float | None = None
    custom_depth: float | None = None
    addon_ids: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.type_id


@dataclass
class FaucetConfig:
    """A faucet selection.

    Attributes:
        type_id: Faucet kit id or faucet type alias.
        placement: Position tag (``BASIN_2``, ``BETWEEN_1_2``) or None when
            the faucet is not placed.
        quantity: Number of faucets of this type.
        mandatory: Set on faucets injected by the rule engine.
    """

    type_id: str
    placement: str | None = None
    quantity: int = 1
    mandatory: bool = False


@dataclass
class SprayerConfig:
    type_id: str
    location: str | None = None


@dataclass
class PegboardConfig:
    """Pegboard options.

    Attributes:
        enabled: Whether a pegboard is fitted at all.
        type_id: PERFORATED or SOLID.
        color_id: Color code (``BLUE``) or color option id (``T-OA-PB-COLOR-BLUE``).
    """

    enabled: bool = False
    type_id: str | None = None
    color_id: str | None = None


@dataclass
class AccessorySelection:
    id: str
    quantity: int = 1


@dataclass
class Configuration:
    """The normalized input record for one build.

    Dimensions are in inches. ``length`` is the sink length used for sink
    body and pegboard selection.
    """

    sink_model_id: str | None = None
    width: float | None = None
    length: float | None = None
    legs_type_id: str | None = None
    feet_type_id: str | None = None
    pegboard: PegboardConfig = field(default_factory=PegboardConfig)
    drawer_item_ids: list[str] = field(default_factory=list)
    workflow_direction: str | None = None
    basins: list[BasinConfig] = field(default_factory=list)
    faucets: list[FaucetConfig] = field(default_factory=list)
    sprayers: list[SprayerConfig] = field(default_factory=list)
    control_box_id: str | None = None
    accessories: list[AccessorySelection] = field(default_factory=list)

    @property
    def basin_count(self) -> int:
        return len(self.basins)

    def snapshot(self) -> "Configuration":
        """Return an independent deep copy for one compilation."""
        return copy.deepcopy(self)
