"""Structural business rules for sink configurations.

The rule engine validates and repairs derived state rather than rejecting
input: invalid faucet placements are reassigned, mandatory faucets are
injected and surplus faucets are dropped. Every repair is recorded on the
returned ``RuleOutcome`` so callers can surface what changed.

Rules applied by ``apply_rules``, in order:

1. Placement repair: each faucet keeps a legal, unclaimed placement or is
   moved to the first legal one (unplaced when none remains).
2. Mandatory injection: one DI gooseneck faucet per build with an E_SINK_DI
   basin, preferring that basin's center.
3. Ceiling: trailing faucets beyond the ceiling are dropped, sparing
   mandatory faucets and the DI gooseneck of an E_SINK_DI build.
4. Placement repair again, since steps 2 and 3 change the faucet set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..catalog import LookupTables
from ..entities import BasinConfig, Configuration, FaucetConfig
from ..value_objects import BasinKind, between_placement, center_placement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleRepair:
    """A change made by the rule engine.

    Attributes:
        field: Configuration path that changed (``faucets[1].placement``).
        before: Previous value, if any.
        after: New value, if any.
        message: Human-readable description.
    """

    field: str
    before: str | None
    after: str | None
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "before": self.before, "after": self.after, "message": self.message}


@dataclass(frozen=True)
class RuleOutcome:
    configuration: Configuration
    repairs: tuple[RuleRepair, ...] = field(default_factory=tuple)

    @property
    def changed(self) -> bool:
        return len(self.repairs) > 0


def _record(repairs: list[RuleRepair] | None, repair: RuleRepair) -> None:
    logger.warning(repair.message)
    if repairs is not None:
        repairs.append(repair)


def _is_edrain(basin: BasinConfig, tables: LookupTables) -> bool:
    return tables.basin_kind_of(basin.type_id) == BasinKind.E_DRAIN.value


def _is_di(basin: BasinConfig, tables: LookupTables) -> bool:
    return tables.basin_kind_of(basin.type_id) == BasinKind.E_SINK_DI.value


# --- Basin capacity ---


def select_sink_model(config: Configuration, model_id: str, tables: LookupTables) -> Configuration:
    """Return a copy of ``config`` with ``model_id`` selected.

    When the model changes, or the current basin list does not match the
    model's basin count, the basin list is replaced by exactly N empty slots
    and the faucet rules are re-applied. Unknown models keep the basin list.

    Args:
        config: Current configuration; not modified.
        model_id: Sink model to select, e.g. ``T2-B3``.
        tables: Lookup tables with the model basin counts.

    Returns:
        The updated copy.
    """
    updated = config.snapshot()
    capacity = tables.basin_capacity(model_id)
    model_changed = updated.sink_model_id != model_id
    updated.sink_model_id = model_id
    if capacity is not None and (model_changed or len(updated.basins) != capacity):
        logger.debug(f"Resetting basins to {capacity} empty slots for model {model_id}")
        updated.basins = [BasinConfig() for _ in range(capacity)]
    return apply_rules(updated, tables).configuration


def update_basin(config: Configuration, index: int, basin: BasinConfig, tables: LookupTables) -> RuleOutcome:
    """Replace basin ``index`` and re-validate faucets against the new composition."""
    updated = config.snapshot()
    updated.basins[index] = basin
    return apply_rules(updated, tables)


def remove_basin(config: Configuration, index: int, tables: LookupTables) -> RuleOutcome:
    """Remove basin ``index`` and re-validate faucets against the new composition."""
    updated = config.snapshot()
    del updated.basins[index]
    return apply_rules(updated, tables)


# --- Faucets ---


def faucet_ceiling(basins: list[BasinConfig], tables: LookupTables) -> int:
    """Maximum number of faucets a build may carry.

    All E_DRAIN builds admit faucets only between basins, so the ceiling is
    ``max(1, n - 1)``. Otherwise it is 2 for up to two basins and 3 beyond.
    """
    count = len(basins)
    if count and all(_is_edrain(basin, tables) for basin in basins):
        return max(1, count - 1)
    return 2 if count <= 2 else 3


def legal_placements(basins: list[BasinConfig], tables: LookupTables) -> list[str]:
    """All placements the basin composition allows, ignoring occupancy."""
    options = [
        center_placement(number)
        for number, basin in enumerate(basins, start=1)
        if not _is_edrain(basin, tables)
    ]
    options.extend(between_placement(number) for number in range(1, len(basins)))
    return options


def placement_candidates(
    basins: list[BasinConfig],
    faucets: list[FaucetConfig],
    exclude_index: int | None,
    tables: LookupTables,
) -> list[str]:
    """Placements available to faucet ``exclude_index``.

    Placements already used by any other faucet are excluded. Pass None to
    list the options for a new faucet.
    """
    occupied = {
        faucet.placement
        for index, faucet in enumerate(faucets)
        if index != exclude_index and faucet.placement
    }
    return [option for option in legal_placements(basins, tables) if option not in occupied]


def repair_placements(
    config: Configuration,
    tables: LookupTables,
    repairs: list[RuleRepair] | None = None,
) -> Configuration:
    """Make every faucet placement legal and unique, in place.

    Faucets keep their placement when it is legal and not claimed by an
    earlier faucet. The rest move to the first free legal placement, or are
    unplaced when none is left. Never raises.

    Args:
        config: Working configuration, modified in place.
        tables: Lookup tables used to classify basins.
        repairs: Collector for the reassignments, if given.

    Returns:
        The same ``config``.
    """
    legal = legal_placements(config.basins, tables)
    claimed: set[str] = set()
    pending: list[int] = []
    for index, faucet in enumerate(config.faucets):
        if faucet.placement in legal and faucet.placement not in claimed:
            claimed.add(faucet.placement)
        else:
            pending.append(index)

    for index in pending:
        faucet = config.faucets[index]
        free = [option for option in legal if option not in claimed]
        target = free[0] if free else None
        if target is not None:
            claimed.add(target)
        if target == faucet.placement:
            continue
        _record(
            repairs,
            RuleRepair(
                field=f"faucets[{index}].placement",
                before=faucet.placement,
                after=target,
                message=(
                    f"Faucet {index + 1} placement {faucet.placement or 'unset'} "
                    f"reassigned to {target or 'unplaced'}"
                ),
            ),
        )
        faucet.placement = target
    return config


def _resolved_faucet_type(faucet: FaucetConfig, tables: LookupTables) -> str:
    return tables.faucet_types.get(faucet.type_id, faucet.type_id)


def inject_mandatory_faucets(
    config: Configuration,
    tables: LookupTables,
    repairs: list[RuleRepair] | None = None,
) -> Configuration:
    """Append a DI gooseneck faucet for E_SINK_DI builds, in place.

    Does nothing when a DI gooseneck is already present, so repeated calls
    never add a second one. Mandatory faucets left over from an earlier basin
    composition without an E_SINK_DI basin are removed.
    """
    di_numbers = [number for number, basin in enumerate(config.basins, start=1) if _is_di(basin, tables)]

    if not di_numbers:
        kept = [f for f in config.faucets if not f.mandatory]
        if len(kept) != len(config.faucets):
            _record(
                repairs,
                RuleRepair("faucets", tables.di_faucet_id, None, "Removed DI gooseneck faucet: no E_SINK_DI basin"),
            )
            config.faucets = kept
        return config

    if any(_resolved_faucet_type(f, tables) == tables.di_faucet_id for f in config.faucets):
        return config

    preferred = center_placement(di_numbers[0])
    free = placement_candidates(config.basins, config.faucets, None, tables)
    if preferred in free:
        placement = preferred
    else:
        placement = free[0] if free else None
    config.faucets.append(FaucetConfig(type_id=tables.di_faucet_id, placement=placement, mandatory=True))
    _record(
        repairs,
        RuleRepair(
            field=f"faucets[{len(config.faucets) - 1}]",
            before=None,
            after=tables.di_faucet_id,
            message=f"Added DI gooseneck faucet at {placement or 'unplaced'} for E_SINK_DI basin {di_numbers[0]}",
        ),
    )
    return config


def _protected_indices(config: Configuration, tables: LookupTables) -> set[int]:
    protected = {i for i, f in enumerate(config.faucets) if f.mandatory}
    if any(_is_di(basin, tables) for basin in config.basins):
        di_indices = [
            i for i, f in enumerate(config.faucets) if _resolved_faucet_type(f, tables) == tables.di_faucet_id
        ]
        if di_indices and not protected.intersection(di_indices):
            protected.add(di_indices[0])
    return protected


def enforce_faucet_ceiling(
    config: Configuration,
    tables: LookupTables,
    repairs: list[RuleRepair] | None = None,
) -> Configuration:
    """Drop trailing faucets beyond the ceiling, in place.

    Mandatory faucets are never dropped. On builds with an E_SINK_DI basin
    the first DI gooseneck is kept too, whether it was injected or selected
    by the user.

    Args:
        config: Working configuration, modified in place.
        tables: Lookup tables used to resolve basin and faucet types.
        repairs: Collector for the removals, if given.

    Returns:
        The same ``config``.
    """
    ceiling = faucet_ceiling(config.basins, tables)
    while len(config.faucets) > ceiling:
        protected = _protected_indices(config, tables)
        droppable = [i for i in range(len(config.faucets)) if i not in protected]
        if not droppable:
            break
        index = droppable[-1]
        dropped = config.faucets.pop(index)
        _record(
            repairs,
            RuleRepair(
                field=f"faucets[{index}]",
                before=dropped.type_id,
                after=None,
                message=f"Removed faucet {dropped.type_id}: build allows at most {ceiling} faucets",
            ),
        )
    return config


def apply_rules(config: Configuration, tables: LookupTables) -> RuleOutcome:
    """Validate and repair a configuration snapshot.

    The input is not modified. Applying the rules to their own output makes
    no further changes.

    Args:
        config: Configuration to check.
        tables: Lookup tables used to classify basins and faucets.

    Returns:
        The repaired copy with every repair made, in order.
    """
    working = config.snapshot()
    repairs: list[RuleRepair] = []
    repair_placements(working, tables, repairs)
    inject_mandatory_faucets(working, tables, repairs)
    enforce_faucet_ceiling(working, tables, repairs)
    repair_placements(working, tables, repairs)
    logger.debug(f"Rules applied with {len(repairs)} repairs")
    return RuleOutcome(configuration=working, repairs=tuple(repairs))
