"""Completeness check for build configurations.

A configuration may be compiled at any stage of data entry. The BOM is only
considered final once every mandatory facet below is present; until then the
result carries the list of missing fields and the BOM is a partial preview.
"""

from __future__ import annotations

from sinks.application.dtos import MissingField
from sinks.domain import Configuration, LookupTables

SINK_MODEL = MissingField("sinkModelId", "Sink model")
DIMENSIONS = MissingField("width/length", "Sink dimensions (width/length)")


def missing_fields(config: Configuration, tables: LookupTables) -> list[MissingField]:
    """List the mandatory facets absent from ``config``.

    Returns an empty list when the configuration is complete.
    """
    missing: list[MissingField] = []
    if not config.sink_model_id:
        missing.append(SINK_MODEL)
    if config.width is None or config.length is None:
        missing.append(DIMENSIONS)

    capacity = tables.basin_capacity(config.sink_model_id)
    if capacity is not None and len(config.basins) < capacity:
        missing.append(
            MissingField(
                "basins",
                f"Basin count ({len(config.basins)} of {capacity} configured)",
            )
        )
    for index, basin in enumerate(config.basins):
        if not basin.type_id:
            missing.append(MissingField(f"basins[{index}].basinTypeId", f"Basin {index + 1} type"))
    return missing
