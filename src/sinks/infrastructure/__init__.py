"""Infrastructure layer - presentation adapters."""

from .exporters import (
    ExportManager,
    Exporter,
    ExporterRegistry,
    extract_procurement_items,
)

__all__ = [
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "extract_procurement_items",
]
