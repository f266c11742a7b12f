"""Domain layer - core BOM compilation logic."""

from .catalog import (
    CatalogComponent,
    CatalogItem,
    CategoryRange,
    CoverageRange,
    KeywordRule,
    LookupTables,
    SinkModel,
    parse_part_number,
)
from .entities import (
    AccessorySelection,
    BasinConfig,
    Configuration,
    FaucetConfig,
    PegboardConfig,
    SprayerConfig,
)
from .services import (
    BomAssembler,
    Categorizer,
    ResolutionWarning,
    ResolvedConfiguration,
    RuleOutcome,
    RuleRepair,
    aggregate_tree,
    apply_rules,
    resolve_configuration,
)
from .value_objects import (
    AccessoryKind,
    BasinKind,
    BOMNode,
    Category,
    Classification,
)

__all__ = [
    "AccessoryKind",
    "AccessorySelection",
    "BOMNode",
    "BasinConfig",
    "BasinKind",
    "BomAssembler",
    "CatalogComponent",
    "CatalogItem",
    "Categorizer",
    "Category",
    "CategoryRange",
    "Classification",
    "Configuration",
    "CoverageRange",
    "FaucetConfig",
    "KeywordRule",
    "LookupTables",
    "PegboardConfig",
    "ResolutionWarning",
    "ResolvedConfiguration",
    "RuleOutcome",
    "RuleRepair",
    "SinkModel",
    "SprayerConfig",
    "aggregate_tree",
    "apply_rules",
    "parse_part_number",
    "resolve_configuration",
]
