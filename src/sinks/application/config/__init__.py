"""Configuration schema and loading system for sink builds.

Public API:
    - SinkConfigurationSchema: Build configuration document model
    - OrderSchema: Multi-build order document model
    - load_config / load_config_from_dict: Load a build configuration
    - load_order / load_order_from_dict: Load an order
    - ConfigError: Exception for configuration errors
    - config_to_domain / order_to_input: Convert documents to domain input
    - ValidationResult: Container for validation results
    - validate_config: Run the rule validators

Example:
    >>> from pathlib import Path
    >>> from sinks.application.config import load_config, config_to_domain, ConfigError
    >>>
    >>> try:
    ...     config = config_to_domain(load_config(Path("build-001.json")))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from sinks.application.config.adapter import config_to_domain, order_to_input
from sinks.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_order,
    load_order_from_dict,
)
from sinks.application.config.schemas import (
    AccessorySchema,
    BasinSchema,
    FaucetSchema,
    OrderSchema,
    PegboardSchema,
    SinkConfigurationSchema,
    SprayerSchema,
)
from sinks.application.config.validators import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    ValidatorRegistry,
    validate_config,
)

__all__ = [
    "AccessorySchema",
    "BasinSchema",
    "ConfigError",
    "FaucetSchema",
    "OrderSchema",
    "PegboardSchema",
    "SinkConfigurationSchema",
    "SprayerSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "ValidatorRegistry",
    "config_to_domain",
    "load_config",
    "load_config_from_dict",
    "load_order",
    "load_order_from_dict",
    "order_to_input",
    "validate_config",
]
