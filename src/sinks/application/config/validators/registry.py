"""Validator registry for sink configuration validators."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from .base import ValidationResult

if TYPE_CHECKING:
    from sinks.contracts.validators import Validator
    from sinks.domain import Configuration, LookupTables

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Named rule validators shared by the CLI and the REST API.

    Validators run in name order so reports are stable. A disabled validator
    stays registered but is skipped by ``validate_all``.

    Example:
        ValidatorRegistry.register(FaucetRulesValidator())
        ValidatorRegistry.disable("faucet_rules")
        result = ValidatorRegistry.validate_all(config, tables)
    """

    _validators: ClassVar[dict[str, "Validator"]] = {}
    _disabled: ClassVar[set[str]] = set()

    @classmethod
    def register(cls, validator: "Validator") -> None:
        """Register ``validator`` under its name, replacing any previous one.

        Args:
            validator: Object satisfying the ``Validator`` protocol.
        """
        if validator.name in cls._validators:
            logger.warning(f"Replacing validator '{validator.name}'")
        cls._validators[validator.name] = validator
        logger.debug(f"Registered validator '{validator.name}' ({type(validator).__name__})")

    @classmethod
    def get(cls, name: str) -> "Validator":
        """Look up a validator.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        try:
            return cls._validators[name]
        except KeyError:
            raise KeyError(
                f"No validator registered with name '{name}'. "
                f"Available validators: {', '.join(cls.available()) or 'none'}"
            ) from None

    @classmethod
    def available(cls) -> list[str]:
        """Registered validator names, sorted."""
        return sorted(cls._validators)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._validators

    @classmethod
    def enable(cls, name: str) -> None:
        """Re-enable a disabled validator.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        cls.get(name)
        cls._disabled.discard(name)

    @classmethod
    def disable(cls, name: str) -> None:
        """Skip a validator in ``validate_all`` without unregistering it.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        cls.get(name)
        cls._disabled.add(name)

    @classmethod
    def validate_all(cls, config: "Configuration", tables: "LookupTables") -> ValidationResult:
        """Run every enabled validator and merge the findings.

        A validator that raises is reported as an error on the ``validation``
        path; the remaining validators still run.

        Args:
            config: Domain configuration to check.
            tables: Lookup tables the validators consult.

        Returns:
            Merged findings of every enabled validator, in name order.
        """
        result = ValidationResult()
        for name in cls.available():
            if name in cls._disabled:
                continue
            try:
                result.merge(cls._validators[name].validate(config, tables))
            except Exception as e:
                logger.error(f"Validator '{name}' raised: {e}")
                result.add_error(path="validation", message=f"Validator '{name}' failed: {e}")
        logger.debug(
            f"Validation finished: {len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result

    @classmethod
    def clear(cls) -> None:
        """Forget every validator and disabled flag (tests)."""
        cls._validators.clear()
        cls._disabled.clear()
