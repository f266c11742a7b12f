"""Domain services for BOM compilation.

The pipeline stages, in dependency order:

- resolver: user-facing selections to catalog identifiers
- rule_engine: structural constraints and repairs
- assembler: hierarchical BOM expansion
- aggregator: duplicate reconciliation
- categorizer: semantic classification
"""

from .aggregator import aggregate_nodes, aggregate_tree, flatten_tree
from .assembler import BomAssembler
from .categorizer import Categorizer
from .resolver import (
    ResolutionWarning,
    ResolvedBasin,
    ResolvedBasinSize,
    ResolvedConfiguration,
    ResolvedFaucet,
    ResolvedPegboard,
    custom_basin_size,
    is_control_box_ready,
    parse_pegboard_kit,
    pegboard_bucket,
    resolve_basin_size,
    resolve_basin_type,
    resolve_configuration,
    resolve_control_box,
    resolve_pegboard_color,
    resolve_pegboard_kit,
    resolve_sink_body,
)
from .rule_engine import (
    RuleOutcome,
    RuleRepair,
    apply_rules,
    enforce_faucet_ceiling,
    faucet_ceiling,
    inject_mandatory_faucets,
    legal_placements,
    placement_candidates,
    remove_basin,
    repair_placements,
    select_sink_model,
    update_basin,
)

__all__ = [
    "BomAssembler",
    "Categorizer",
    "ResolutionWarning",
    "ResolvedBasin",
    "ResolvedBasinSize",
    "ResolvedConfiguration",
    "ResolvedFaucet",
    "ResolvedPegboard",
    "RuleOutcome",
    "RuleRepair",
    "aggregate_nodes",
    "aggregate_tree",
    "apply_rules",
    "custom_basin_size",
    "enforce_faucet_ceiling",
    "faucet_ceiling",
    "flatten_tree",
    "inject_mandatory_faucets",
    "is_control_box_ready",
    "legal_placements",
    "parse_pegboard_kit",
    "pegboard_bucket",
    "placement_candidates",
    "remove_basin",
    "repair_placements",
    "resolve_basin_size",
    "resolve_basin_type",
    "resolve_configuration",
    "resolve_control_box",
    "resolve_pegboard_color",
    "resolve_pegboard_kit",
    "resolve_sink_body",
    "select_sink_model",
    "update_basin",
]
