"""Pydantic response schemas for the REST API.

Responses use the camelCase field names of the result record.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RESPONSE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BomNodeSchema(BaseModel):
    """One node of the hierarchical or flattened BOM."""

    model_config = RESPONSE_CONFIG

    id: str
    part_number: str | None = None
    name: str
    quantity: int
    category: str | None = Field(default=None, description="Category label, e.g. ACCESSORY/STORAGE")
    children: list[BomNodeSchema] = Field(default_factory=list)
    source_contexts: list[str] = Field(default_factory=list)
    is_placeholder: bool = False
    is_custom: bool = False


class MissingFieldSchema(BaseModel):
    path: str
    label: str


class WarningSchema(BaseModel):
    field: str
    value: str | None = None
    message: str


class RepairSchema(BaseModel):
    field: str
    before: str | None = None
    after: str | None = None
    message: str


class BomResultSchema(BaseModel):
    """Response for BOM compilation."""

    model_config = RESPONSE_CONFIG

    hierarchical: list[BomNodeSchema] = Field(default_factory=list)
    flattened: list[BomNodeSchema] = Field(default_factory=list)
    total_items: int = Field(..., description="Distinct items in the flattened view")
    top_level_items: int = Field(..., description="Top-level nodes in the hierarchical view")
    missing_fields: list[MissingFieldSchema] = Field(default_factory=list)
    warnings: list[WarningSchema] = Field(default_factory=list)
    repairs: list[RepairSchema] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(default_factory=list, description="Validation errors")
    warnings: list[dict[str, Any]] = Field(default_factory=list, description="Validation warnings")


class SinkModelInfoSchema(BaseModel):
    model_config = RESPONSE_CONFIG

    id: str
    name: str
    basin_count: int


class SinkModelListSchema(BaseModel):
    sink_models: list[SinkModelInfoSchema] = Field(default_factory=list)

    model_config = RESPONSE_CONFIG
