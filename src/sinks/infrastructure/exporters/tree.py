"""Indented text rendering of the hierarchical BOM for debug views."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from sinks.infrastructure.exporters.base import Exporter, ExporterRegistry

if TYPE_CHECKING:
    from sinks.application.dtos import BomResult
    from sinks.domain import BOMNode


def format_node(node: BOMNode, depth: int = 0, indent: str = "  ") -> list[str]:
    """Lines for ``node`` and its descendants.

    Example line:
        T2-BSN-ESK-KIT  E-Sink Basin Kit  x2  [BASIN]  (aggregated from 2 sources)
    """
    parts = [node.id]
    if node.name and node.name != node.id:
        parts.append(node.name)
    parts.append(f"x{node.quantity}")
    if node.category is not None:
        parts.append(f"[{node.category.label}]")
    if node.is_placeholder:
        parts.append("(not in catalog)")
    elif node.is_custom:
        parts.append(f"(custom part {node.part_number})")
    if node.source_count > 1:
        parts.append(f"(aggregated from {node.source_count} sources)")

    lines = [f"{indent * depth}{'  '.join(parts)}"]
    for child in node.children:
        lines.extend(format_node(child, depth + 1, indent))
    return lines


@ExporterRegistry.register("tree")
class TreeBomExporter(Exporter):
    """Hierarchical view as indented text, followed by a summary.

    Attributes:
        format_name: "tree"
        file_extension: "txt"
    """

    format_name: ClassVar[str] = "tree"
    file_extension: ClassVar[str] = "txt"

    def export_string(self, result: BomResult) -> str:
        lines: list[str] = []
        for node in result.hierarchical:
            lines.extend(format_node(node))
        lines.append("")
        lines.append(f"Top-level items: {result.top_level_items}")
        lines.append(f"Total distinct items: {result.total_items}")
        if result.missing_fields:
            lines.append("Missing: " + ", ".join(field.label for field in result.missing_fields))
        for warning in result.warnings:
            lines.append(f"Warning: {warning.message}")
        return "\n".join(lines) + "\n"
