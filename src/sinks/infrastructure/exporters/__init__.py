"""Exporter framework for compiled BOMs.

Registered exporters:
- csv: flattened, aggregated list
- json: the full result record with both views
- tree: indented hierarchical text for debug views
- procurement: CSV of leg and foot items only

Usage:
    from sinks.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("csv")()
    print(exporter.export_string(result))
"""

from sinks.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from sinks.infrastructure.exporters.csv_exporter import CsvBomExporter
from sinks.infrastructure.exporters.json_exporter import JsonBomExporter
from sinks.infrastructure.exporters.procurement import (
    ProcurementExporter,
    extract_procurement_items,
    is_procurement_item,
)
from sinks.infrastructure.exporters.tree import TreeBomExporter, format_node

__all__ = [
    "CsvBomExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonBomExporter",
    "ProcurementExporter",
    "TreeBomExporter",
    "extract_procurement_items",
    "format_node",
    "is_procurement_item",
]
