"""Sink dimension and pegboard validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sinks.domain.services.resolver import resolve_pegboard_color

from .base import ValidationResult

if TYPE_CHECKING:
    from sinks.domain import Configuration, LookupTables


class DimensionsValidator:
    """Checks sink width/length and the options that depend on them."""

    @property
    def name(self) -> str:
        return "dimensions"

    def validate(self, config: Configuration, tables: LookupTables) -> ValidationResult:
        result = ValidationResult()

        if config.width is None:
            result.add_error("width", "Sink width is required")
        if config.length is None:
            result.add_error("length", "Sink length is required")
        elif tables.sink_bodies and tables.coverage_for(tables.sink_bodies, config.length) is None:
            low = min(r.low for r in tables.sink_bodies)
            high = max(r.high for r in tables.sink_bodies)
            result.add_error(
                "length",
                f'No sink body assembly for length {config.length:g}". Supported range: {low:g}"-{high:g}"',
                config.length,
            )

        pegboard = config.pegboard
        if pegboard.enabled:
            if not pegboard.type_id:
                result.add_warning(
                    "pegboard.typeId",
                    "Pegboard type not set",
                    suggestion="A solid pegboard kit will be used",
                )
            color = resolve_pegboard_color(pegboard.color_id)
            if color and tables.pegboard_colors and color not in tables.pegboard_colors:
                result.add_warning(
                    "pegboard.colorId",
                    f"Unknown pegboard color '{pegboard.color_id}'",
                    suggestion=f"Use one of: {', '.join(tables.pegboard_colors)}",
                )
        return result
