"""Procurement extraction: the legs and feet that are ordered separately."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from sinks.domain import parse_part_number
from sinks.infrastructure.exporters.base import Exporter, ExporterRegistry
from sinks.infrastructure.exporters.csv_exporter import write_rows

if TYPE_CHECKING:
    from sinks.application.dtos import BomResult
    from sinks.domain import BOMNode

PROCUREMENT_SOURCES = frozenset({"LEGS", "FEET"})
PROCUREMENT_MAJOR = 711
PROCUREMENT_MINOR_RANGE = (95, 101)


def _facet(source: str) -> str:
    # Order builds tag sources as "<build>:<facet>"
    return source.rsplit(":", 1)[-1]


def _in_procurement_range(candidate: str | None) -> bool:
    code = parse_part_number(candidate)
    if code is None:
        return False
    major, minor = code
    low, high = PROCUREMENT_MINOR_RANGE
    return major == PROCUREMENT_MAJOR and low <= minor <= high


def is_procurement_item(node: BOMNode) -> bool:
    """True for leg and foot kits, by provenance or by part number.

    Both the node's part number and its id are checked against the
    711.95-711.101 range.
    """
    if any(_facet(source) in PROCUREMENT_SOURCES for source in node.source_contexts):
        return True
    return any(_in_procurement_range(candidate) for candidate in (node.part_number, node.id))


def extract_procurement_items(result: BomResult) -> list[BOMNode]:
    """Flattened nodes that procurement orders from suppliers."""
    return [node for node in result.flattened if is_procurement_item(node)]


@ExporterRegistry.register("procurement")
class ProcurementExporter(Exporter):
    """CSV of procurement items only.

    Attributes:
        format_name: "procurement"
        file_extension: "csv"
    """

    format_name: ClassVar[str] = "procurement"
    file_extension: ClassVar[str] = "csv"

    def export_string(self, result: BomResult) -> str:
        return write_rows(extract_procurement_items(result))
