"""Pydantic schemas for build configuration and order documents."""

from sinks.application.config.schemas.configuration import (
    AccessorySchema,
    BasinSchema,
    FaucetSchema,
    PegboardSchema,
    SinkConfigurationSchema,
    SprayerSchema,
)
from sinks.application.config.schemas.order import OrderSchema

__all__ = [
    "AccessorySchema",
    "BasinSchema",
    "FaucetSchema",
    "OrderSchema",
    "PegboardSchema",
    "SinkConfigurationSchema",
    "SprayerSchema",
]
