"""Reconciliation of duplicate BOM nodes.

The same part can be contributed by several configuration facets, e.g. a
pegboard color kit nested under a pegboard kit and also selected standalone.
Aggregation merges such duplicates once per compilation; every view consumes
the merged result rather than repeating the merge.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from ..value_objects import BOMNode

logger = logging.getLogger(__name__)

UNKNOWN_SOURCE = "unknown"


def flatten_tree(nodes: Iterable[BOMNode]) -> list[BOMNode]:
    """List every node of a tree, depth-first pre-order, without children.

    Quantities are already absolute, so flattened entries can be summed
    directly.

    Args:
        nodes: Top-level nodes of an assembled BOM.

    Returns:
        Every node of every tree, each with an empty child list.
    """
    flat: list[BOMNode] = []
    for root in nodes:
        for node in root.walk():
            flat.append(replace(node, children=()) if node.children else node)
    return flat


def aggregate_nodes(nodes: Iterable[BOMNode]) -> list[BOMNode]:
    """Merge nodes sharing the same ``(id, name)`` key.

    On collision the quantities are summed, provenance tags of every
    contributor are appended, and child lists are concatenated without
    further merging. The first occurrence fixes the position of the merged
    node and its remaining attributes.

    Aggregating an already-aggregated list returns equal nodes.

    Args:
        nodes: Nodes to merge, in emission order.

    Returns:
        One node per key, in order of first occurrence. Nodes without
        provenance are tagged ``unknown``.
    """
    merged: dict[tuple[str, str], BOMNode] = {}
    for node in nodes:
        contexts = node.source_contexts or (UNKNOWN_SOURCE,)
        existing = merged.get(node.merge_key)
        if existing is None:
            merged[node.merge_key] = replace(node, source_contexts=contexts)
            continue
        merged[node.merge_key] = replace(
            existing,
            quantity=existing.quantity + node.quantity,
            source_contexts=existing.source_contexts + contexts,
            children=existing.children + node.children,
        )
        logger.debug(
            f"Aggregated {node.id}: total quantity {existing.quantity + node.quantity} "
            f"from {len(existing.source_contexts) + len(contexts)} sources"
        )
    return list(merged.values())


def aggregate_tree(nodes: Iterable[BOMNode]) -> tuple[list[BOMNode], list[BOMNode]]:
    """Aggregate a BOM tree into its hierarchical and flattened views.

    Args:
        nodes: Top-level nodes produced by the assembler.

    Returns:
        Tuple of (top-level nodes merged one level deep, flattened list with
        one node per identifier).
    """
    roots = list(nodes)
    return aggregate_nodes(roots), aggregate_nodes(flatten_tree(roots))
