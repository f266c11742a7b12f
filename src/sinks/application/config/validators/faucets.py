"""Faucet rule validation.

Everything flagged here is repaired automatically during compilation, so the
findings are warnings describing what the rule engine will change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sinks.domain.services import faucet_ceiling, legal_placements
from sinks.domain.value_objects import BasinKind

from .base import ValidationResult

if TYPE_CHECKING:
    from sinks.domain import Configuration, LookupTables


class FaucetRulesValidator:
    """Checks faucet count, placements and the DI gooseneck requirement."""

    @property
    def name(self) -> str:
        return "faucet_rules"

    def validate(self, config: Configuration, tables: LookupTables) -> ValidationResult:
        result = ValidationResult()

        ceiling = faucet_ceiling(config.basins, tables)
        if len(config.faucets) > ceiling:
            result.add_warning(
                "faucets",
                f"{len(config.faucets)} faucets exceed the maximum of {ceiling} for this basin layout",
                suggestion=f"Faucets beyond the first {ceiling} will be dropped",
            )

        legal = legal_placements(config.basins, tables)
        seen: set[str] = set()
        for index, faucet in enumerate(config.faucets):
            path = f"faucets[{index}].placement"
            if faucet.placement is None:
                result.add_warning(path, f"Faucet {index + 1} has no placement")
            elif faucet.placement not in legal:
                result.add_warning(
                    path,
                    f"Placement {faucet.placement} is not available for this basin layout",
                    suggestion=f"Use one of: {', '.join(legal) or 'none'}",
                )
            elif faucet.placement in seen:
                result.add_warning(path, f"Placement {faucet.placement} is used by another faucet")
            if faucet.placement:
                seen.add(faucet.placement)

        has_di_basin = any(
            tables.basin_kind_of(basin.type_id) == BasinKind.E_SINK_DI.value for basin in config.basins
        )
        has_di_faucet = any(
            tables.faucet_types.get(f.type_id, f.type_id) == tables.di_faucet_id for f in config.faucets
        )
        if has_di_basin and not has_di_faucet:
            result.add_warning(
                "faucets",
                "E_SINK_DI basin requires a DI gooseneck faucet",
                suggestion=f"{tables.di_faucet_id} will be added automatically",
            )
        return result
