"""Validator protocol for sink configuration validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sinks.application.config.validators.base import ValidationResult
    from sinks.domain import Configuration, LookupTables


@runtime_checkable
class Validator(Protocol):
    """Protocol for configuration validators.

    Validators check one aspect of a Configuration against the lookup tables
    and return a ValidationResult containing any errors or warnings found.

    Example:
        class MyValidator:
            @property
            def name(self) -> str:
                return "my_validator"

            def validate(self, config, tables) -> ValidationResult:
                result = ValidationResult()
                if problem_found:
                    result.add_error("basins[0].basinTypeId", "Description of problem")
                return result
    """

    @property
    def name(self) -> str:
        """Return the unique name/identifier for this validator."""
        ...

    def validate(self, config: Configuration, tables: LookupTables) -> ValidationResult:
        """Validate the given configuration."""
        ...
