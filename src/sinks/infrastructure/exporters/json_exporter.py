"""JSON export of the complete result record."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, ClassVar

from sinks.infrastructure.exporters.base import Exporter, ExporterRegistry

if TYPE_CHECKING:
    from sinks.application.dtos import BomResult


@ExporterRegistry.register("json")
class JsonBomExporter(Exporter):
    """Serializes ``BomResult.to_dict()`` with both views.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export_string(self, result: BomResult) -> str:
        return json.dumps(result.to_dict(), indent=self.indent)
