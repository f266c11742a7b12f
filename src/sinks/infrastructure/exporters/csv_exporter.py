"""CSV export of the flattened, aggregated BOM."""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING, ClassVar, Iterable

from sinks.infrastructure.exporters.base import Exporter, ExporterRegistry

if TYPE_CHECKING:
    from sinks.application.dtos import BomResult
    from sinks.domain import BOMNode


CSV_HEADER = ["Part Number", "Item ID", "Name", "Quantity", "Category", "Sources"]


def write_rows(nodes: Iterable[BOMNode]) -> str:
    """Render nodes as CSV text with the standard header row."""
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(CSV_HEADER)
    for node in nodes:
        writer.writerow(
            [
                node.part_number or "",
                node.id,
                node.name,
                node.quantity,
                node.category.label if node.category else "",
                "; ".join(node.source_contexts),
            ]
        )
    return output.getvalue()


@ExporterRegistry.register("csv")
class CsvBomExporter(Exporter):
    """One row per distinct item of the flattened view.

    Attributes:
        format_name: "csv"
        file_extension: "csv"
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export_string(self, result: BomResult) -> str:
        return write_rows(result.flattened)
