"""Validators subpackage - rule validators for sink configurations.

- BasinCapacityValidator: sink model and basin slots
- FaucetRulesValidator: faucet ceiling, placements, DI gooseneck
- DimensionsValidator: sink dimensions and pegboard options

The ValidatorRegistry coordinates running them against a configuration.
"""

from sinks.domain import Configuration, LookupTables

from .base import ValidationError, ValidationResult, ValidationWarning
from .basins import BasinCapacityValidator
from .dimensions import DimensionsValidator
from .faucets import FaucetRulesValidator
from .registry import ValidatorRegistry


def register_default_validators() -> None:
    """Register the built-in validators that are not registered yet."""
    for validator in (BasinCapacityValidator(), DimensionsValidator(), FaucetRulesValidator()):
        if not ValidatorRegistry.is_registered(validator.name):
            ValidatorRegistry.register(validator)


def validate_config(config: Configuration, tables: LookupTables) -> ValidationResult:
    """Run every enabled validator against a configuration.

    Returns:
        ValidationResult containing merged errors and warnings.
    """
    register_default_validators()
    return ValidatorRegistry.validate_all(config, tables)


__all__ = [
    "BasinCapacityValidator",
    "DimensionsValidator",
    "FaucetRulesValidator",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "ValidatorRegistry",
    "register_default_validators",
    "validate_config",
]
