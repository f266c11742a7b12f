"""Semantic categorization of BOM items.

Resolution order, first match wins:

1. An explicit category already attached to the node.
2. The numeric part-number prefix (``ddd.n``) of the node's part number or
   identifier, checked against the inclusive range table.
3. The ordered keyword rules over identifier and display name.
4. OTHER.

Categories are data: adding one means adding a range or keyword record to the
lookup tables, not a new branch here.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from ..catalog import LookupTables, parse_part_number
from ..value_objects import OTHER, BOMNode, Classification

logger = logging.getLogger(__name__)


class Categorizer:
    """Assigns classifications to BOM nodes using the lookup tables."""

    def __init__(self, tables: LookupTables) -> None:
        self.tables = tables

    def classify(self, node: BOMNode) -> Classification:
        """Classification of one node; an explicit category always wins."""
        if node.category is not None:
            return node.category
        return self.classify_identifier(node.id, node.name, node.part_number)

    def classify_identifier(
        self,
        item_id: str,
        name: str = "",
        part_number: str | None = None,
    ) -> Classification:
        """Classify a bare identifier, e.g. ``711.97`` or ``T2-BODY-48-60-HA``.

        Part-number ranges are checked first, for the part number and then
        the id. Keyword rules follow in table order.

        Args:
            item_id: Catalog identifier.
            name: Display name, matched by keyword rules.
            part_number: Catalog part number, if known.

        Returns:
            The first matching classification, or OTHER.
        """
        for candidate in (part_number, item_id):
            code = parse_part_number(candidate)
            if code is None:
                continue
            for entry in self.tables.category_ranges:
                if entry.matches(code):
                    return entry.classification

        for rule in self.tables.keyword_rules:
            if rule.matches(item_id or "", name or ""):
                return rule.classification
        return OTHER

    def categorize_tree(self, nodes: Iterable[BOMNode]) -> list[BOMNode]:
        """Return copies of ``nodes`` (and all descendants) with categories set."""
        return [self._categorize(node) for node in nodes]

    def _categorize(self, node: BOMNode) -> BOMNode:
        children = tuple(self._categorize(child) for child in node.children)
        return replace(node, category=self.classify(node), children=children)
