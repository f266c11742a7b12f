"""Multi-build order schema."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from sinks.application.config.schemas.configuration import (
    SCHEMA_CONFIG,
    AccessorySchema,
    SinkConfigurationSchema,
)


class OrderSchema(BaseModel):
    """An order of one or more builds sharing a manual language.

    Attributes:
        language: Manual language code.
        build_numbers: Builds in compilation order.
        configurations: Build configuration per build number.
        accessories: Accessory selections per build number.
    """

    model_config = SCHEMA_CONFIG

    language: Literal["EN", "FR", "ES"] = "EN"
    build_numbers: list[str] = Field(..., min_length=1)
    configurations: dict[str, SinkConfigurationSchema] = Field(default_factory=dict)
    accessories: dict[str, list[AccessorySchema]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_unique_build_numbers(self) -> "OrderSchema":
        seen: set[str] = set()
        for number in self.build_numbers:
            if number in seen:
                raise ValueError(f"Duplicate build number '{number}'")
            seen.add(number)
        return self
