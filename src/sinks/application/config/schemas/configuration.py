"""Sink build configuration schemas.

JSON documents use camelCase keys (``sinkModelId``, ``basinTypeId``); the
snake_case field names are accepted as well.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

SCHEMA_CONFIG = ConfigDict(
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class BasinSchema(BaseModel):
    """One basin slot.

    Attributes:
        basin_type_id: E_SINK, E_SINK_DI, E_DRAIN or a basin kit id.
        basin_size_part_number: Size id, legacy alias, assembly id or CUSTOM.
        custom_width: Custom basin width in inches (CUSTOM only).
        custom_length: Custom basin length in inches (CUSTOM only).
        custom_depth: Custom basin depth in inches (CUSTOM only).
        addon_ids: Basin add-on kit ids.
    """

    model_config = SCHEMA_CONFIG

    basin_type_id: str | None = None
    basin_size_part_number: str | None = None
    custom_width: float | None = Field(default=None, gt=0)
    custom_length: float | None = Field(default=None, gt=0)
    custom_depth: float | None = Field(default=None, gt=0)
    addon_ids: list[str] = Field(default_factory=list)


class FaucetSchema(BaseModel):
    model_config = SCHEMA_CONFIG

    faucet_type_id: str = Field(..., min_length=1)
    placement: str | None = None
    quantity: int = Field(default=1, ge=1)


class SprayerSchema(BaseModel):
    model_config = SCHEMA_CONFIG

    sprayer_type_id: str = Field(..., min_length=1)
    location: str | None = None


class PegboardSchema(BaseModel):
    """Pegboard options.

    Attributes:
        enabled: Whether a pegboard is fitted.
        type_id: PERFORATED or SOLID.
        color_id: Color code or color option id.
    """

    model_config = SCHEMA_CONFIG

    enabled: bool = False
    type_id: str | None = None
    color_id: str | None = None


class AccessorySchema(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str = Field(..., min_length=1, validation_alias=AliasChoices("id", "assemblyId"))
    quantity: int = Field(default=1, ge=0)


class SinkConfigurationSchema(BaseModel):
    """Configuration of one build.

    Every field is optional so partially edited configurations load; the
    compilation reports what is still missing.

    Legacy documents with a boolean ``pegboard`` plus top-level
    ``pegboardType``/``pegboardColor`` keys are folded into the nested
    pegboard object.
    """

    model_config = SCHEMA_CONFIG

    sink_model_id: str | None = None
    width: float | None = Field(default=None, gt=0)
    length: float | None = Field(default=None, gt=0)
    legs_type_id: str | None = None
    feet_type_id: str | None = None
    pegboard: PegboardSchema = Field(default_factory=PegboardSchema)
    drawer_item_ids: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("drawerItemIds", "drawersAndCompartments", "drawer_item_ids"),
    )
    workflow_direction: str | None = None
    basins: list[BasinSchema] = Field(default_factory=list)
    faucets: list[FaucetSchema] = Field(default_factory=list)
    sprayers: list[SprayerSchema] = Field(default_factory=list)
    control_box_id: str | None = None
    accessories: list[AccessorySchema] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def fold_legacy_pegboard(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        legacy = isinstance(data.get("pegboard"), bool) or (
            "pegboard" not in data and ("pegboardType" in data or "pegboardColor" in data)
        )
        if not legacy:
            return data
        data = dict(data)
        enabled = data.pop("pegboard", None)
        pegboard = {
            "enabled": bool(enabled) if enabled is not None else True,
            "typeId": data.pop("pegboardType", None),
            "colorId": data.pop("pegboardColor", None),
        }
        data["pegboard"] = pegboard
        return data
