"""Basin capacity validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sinks.domain.value_objects import CUSTOM_SIZE

from .base import ValidationResult

if TYPE_CHECKING:
    from sinks.domain import Configuration, LookupTables


class BasinCapacityValidator:
    """Checks the sink model and its basin slots.

    - The sink model is set and known.
    - The basin list length equals the model's basin count.
    - Every basin slot has a type, and known types resolve.
    - CUSTOM sizes carry all three dimensions.
    """

    @property
    def name(self) -> str:
        return "basin_capacity"

    def validate(self, config: Configuration, tables: LookupTables) -> ValidationResult:
        result = ValidationResult()

        if not config.sink_model_id:
            result.add_error("sinkModelId", "Sink model is required")
        elif tables.sink_models and tables.sink_model(config.sink_model_id) is None:
            result.add_error("sinkModelId", f"Unknown sink model '{config.sink_model_id}'", config.sink_model_id)
        else:
            capacity = tables.basin_capacity(config.sink_model_id)
            if capacity is not None and len(config.basins) != capacity:
                result.add_error(
                    "basins",
                    f"Sink model {config.sink_model_id} has {capacity} basin(s), "
                    f"configuration lists {len(config.basins)}",
                    len(config.basins),
                )

        for index, basin in enumerate(config.basins):
            path = f"basins[{index}]"
            if basin.is_empty:
                result.add_error(f"{path}.basinTypeId", f"Basin {index + 1} type is required")
            elif tables.basin_types and tables.basin_kind_of(basin.type_id) is None:
                result.add_warning(
                    f"{path}.basinTypeId",
                    f"Unknown basin type '{basin.type_id}'",
                    suggestion=f"Use one of: {', '.join(sorted(tables.basin_types))}",
                )

            if basin.size_id and basin.size_id.strip().upper() == CUSTOM_SIZE:
                for dimension in ("custom_width", "custom_length", "custom_depth"):
                    if getattr(basin, dimension) is None:
                        camel = "custom" + dimension.split("_")[1].title()
                        result.add_error(f"{path}.{camel}", f"Custom basin {index + 1} requires {camel}")
        return result
