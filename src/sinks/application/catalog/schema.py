"""Schema for lookup-table documents.

Every section is optional: a partially loaded catalog is still a valid set of
lookup tables, and compilation degrades to pass-through identifiers for the
parts it cannot find.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from sinks.domain.catalog import (
    CatalogComponent,
    CatalogItem,
    CategoryRange,
    CoverageRange,
    KeywordRule,
    LookupTables,
    SinkModel,
)
from sinks.domain.value_objects import Classification

TABLE_CONFIG = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


def _check_classification(value: str | None) -> str | None:
    if value is not None:
        Classification.parse(value)
    return value


class ComponentSchema(BaseModel):
    model_config = TABLE_CONFIG

    id: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=1)


class ItemSchema(BaseModel):
    """A catalog item with optional nested components."""

    model_config = TABLE_CONFIG

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    part_number: str | None = None
    category: str | None = None
    components: list[ComponentSchema] = Field(default_factory=list)

    _category = field_validator("category")(_check_classification)


class SinkModelSchema(BaseModel):
    model_config = TABLE_CONFIG

    id: str = Field(..., min_length=1)
    name: str
    basin_count: int = Field(..., ge=1)


class CoverageSchema(BaseModel):
    model_config = TABLE_CONFIG

    key: str = Field(..., min_length=1)
    low: float
    high: float

    @model_validator(mode="after")
    def check_bounds(self) -> "CoverageSchema":
        if self.low > self.high:
            raise ValueError(f"Range {self.key} has low {self.low} above high {self.high}")
        return self


class CategoryRangeSchema(BaseModel):
    """Part-number range; omit low/high to match every minor code."""

    model_config = TABLE_CONFIG

    major: int = Field(..., ge=0, le=999)
    low: int | None = None
    high: int | None = None
    category: str

    _category = field_validator("category")(_check_classification)


class KeywordRuleSchema(BaseModel):
    model_config = TABLE_CONFIG

    category: str
    id_prefixes: list[str] = Field(default_factory=list)
    id_contains: list[str] = Field(default_factory=list)
    name_contains: list[str] = Field(default_factory=list)
    within: list[str] = Field(default_factory=list)

    _category = field_validator("category")(_check_classification)


def _lower(values: list[str]) -> tuple[str, ...]:
    return tuple(value.lower() for value in values)


class LookupTablesSchema(BaseModel):
    """Complete lookup-table document."""

    model_config = TABLE_CONFIG

    version: str = "1"
    items: list[ItemSchema] = Field(default_factory=list)
    sink_models: list[SinkModelSchema] = Field(default_factory=list)
    basin_types: dict[str, str] = Field(default_factory=dict)
    basin_sizes: dict[str, str] = Field(default_factory=dict)
    basin_size_aliases: dict[str, str] = Field(default_factory=dict)
    custom_basin_part_number: str = "720.215.001"
    pegboard_coverage: list[CoverageSchema] = Field(default_factory=list)
    pegboard_colors: list[str] = Field(default_factory=list)
    sink_bodies: list[CoverageSchema] = Field(default_factory=list)
    control_boxes: dict[str, str] = Field(default_factory=dict)
    faucet_types: dict[str, str] = Field(default_factory=dict)
    sprayer_types: dict[str, str] = Field(default_factory=dict)
    manual_kits: dict[str, str] = Field(default_factory=dict)
    di_faucet_id: str = "T2-OA-DI-GOOSENECK-FAUCET-KIT"
    overhead_light_kit_id: str = "T2-OHL-MDRD-KIT"
    pegboard_color_kit_id: str = "T-OA-PB-COLOR"
    category_ranges: list[CategoryRangeSchema] = Field(default_factory=list)
    keyword_rules: list[KeywordRuleSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_items(self) -> "LookupTablesSchema":
        seen: set[str] = set()
        for item in self.items:
            if item.id in seen:
                raise ValueError(f"Duplicate catalog item '{item.id}'")
            seen.add(item.id)
        return self

    def to_tables(self) -> LookupTables:
        """Convert to the immutable domain lookup tables."""
        return LookupTables(
            items={
                item.id: CatalogItem(
                    id=item.id,
                    name=item.name,
                    part_number=item.part_number,
                    category=Classification.parse(item.category) if item.category else None,
                    components=tuple(CatalogComponent(c.id, c.quantity) for c in item.components),
                )
                for item in self.items
            },
            sink_models={m.id: SinkModel(m.id, m.name, m.basin_count) for m in self.sink_models},
            basin_types=self.basin_types,
            basin_sizes={key.upper(): value for key, value in self.basin_sizes.items()},
            basin_size_aliases=self.basin_size_aliases,
            custom_basin_part_number=self.custom_basin_part_number,
            pegboard_coverage=tuple(CoverageRange(r.key, r.low, r.high) for r in self.pegboard_coverage),
            pegboard_colors=tuple(color.upper() for color in self.pegboard_colors),
            sink_bodies=tuple(CoverageRange(r.key, r.low, r.high) for r in self.sink_bodies),
            control_boxes=self.control_boxes,
            faucet_types=self.faucet_types,
            sprayer_types=self.sprayer_types,
            manual_kits={key.upper(): value for key, value in self.manual_kits.items()},
            di_faucet_id=self.di_faucet_id,
            overhead_light_kit_id=self.overhead_light_kit_id,
            pegboard_color_kit_id=self.pegboard_color_kit_id,
            category_ranges=tuple(
                CategoryRange(r.major, Classification.parse(r.category), r.low, r.high)
                for r in self.category_ranges
            ),
            keyword_rules=tuple(
                KeywordRule(
                    classification=Classification.parse(rule.category),
                    id_prefixes=_lower(rule.id_prefixes),
                    id_contains=_lower(rule.id_contains),
                    name_contains=_lower(rule.name_contains),
                    within=_lower(rule.within),
                )
                for rule in self.keyword_rules
            ),
        )
