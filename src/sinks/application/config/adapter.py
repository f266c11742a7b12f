"""Conversion of validated documents into domain configurations.

The pydantic schemas describe the JSON shape; the domain works on plain
``Configuration`` dataclasses. This module is the only place the two meet.
"""

from sinks.application.config.schemas import (
    AccessorySchema,
    OrderSchema,
    SinkConfigurationSchema,
)
from sinks.application.dtos import OrderInput
from sinks.domain import (
    AccessorySelection,
    BasinConfig,
    Configuration,
    FaucetConfig,
    PegboardConfig,
    SprayerConfig,
)


def _accessories(items: list[AccessorySchema]) -> list[AccessorySelection]:
    return [AccessorySelection(id=item.id, quantity=item.quantity) for item in items]


def config_to_domain(config: SinkConfigurationSchema) -> Configuration:
    """Convert a validated configuration document to a domain Configuration."""
    return Configuration(
        sink_model_id=config.sink_model_id,
        width=config.width,
        length=config.length,
        legs_type_id=config.legs_type_id,
        feet_type_id=config.feet_type_id,
        pegboard=PegboardConfig(
            enabled=config.pegboard.enabled,
            type_id=config.pegboard.type_id,
            color_id=config.pegboard.color_id,
        ),
        drawer_item_ids=list(config.drawer_item_ids),
        workflow_direction=config.workflow_direction,
        basins=[
            BasinConfig(
                type_id=basin.basin_type_id,
                size_id=basin.basin_size_part_number,
                custom_width=basin.custom_width,
                custom_length=basin.custom_length,
                custom_depth=basin.custom_depth,
                addon_ids=list(basin.addon_ids),
            )
            for basin in config.basins
        ],
        faucets=[
            FaucetConfig(type_id=f.faucet_type_id, placement=f.placement, quantity=f.quantity)
            for f in config.faucets
        ],
        sprayers=[SprayerConfig(type_id=s.sprayer_type_id, location=s.location) for s in config.sprayers],
        control_box_id=config.control_box_id,
        accessories=_accessories(config.accessories),
    )


def order_to_input(order: OrderSchema) -> OrderInput:
    """Convert a validated order document to an OrderInput DTO."""
    return OrderInput(
        build_numbers=list(order.build_numbers),
        configurations={number: config_to_domain(c) for number, c in order.configurations.items()},
        accessories={number: _accessories(items) for number, items in order.accessories.items()},
        language=order.language,
    )
