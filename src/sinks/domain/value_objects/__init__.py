"""Value objects for the sink configuration domain.

Immutable types shared across the resolver, rule engine, assembler,
aggregator and categorizer. Re-exported from sub-modules for convenience.
"""

from __future__ import annotations

from ._basins import (
    BETWEEN_PREFIX,
    CENTER_PREFIX,
    CUSTOM_SIZE,
    BasinKind,
    between_placement,
    center_placement,
    placement_label,
)
from ._bom import BOMNode
from ._categories import OTHER, AccessoryKind, Category, Classification

__all__ = [
    "AccessoryKind",
    "BETWEEN_PREFIX",
    "BOMNode",
    "BasinKind",
    "CENTER_PREFIX",
    "CUSTOM_SIZE",
    "Category",
    "Classification",
    "OTHER",
    "between_placement",
    "center_placement",
    "placement_label",
]
