"""Findings produced by configuration rule validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ValidationError:
    """Blocks compilation of a complete BOM.

    ``path`` uses the configuration's JSON spelling, e.g.
    ``basins[0].basinTypeId``.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Something the rule engine will repair, or that resolves to a placeholder."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """0 when clean, 1 on any error, 2 when only warnings remain."""
        if self.errors:
            return 1
        return 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> ValidationResult:
        self.errors.append(ValidationError(path, message, value))
        return self

    def add_warning(self, path: str, message: str, suggestion: str | None = None) -> ValidationResult:
        self.warnings.append(ValidationWarning(path, message, suggestion))
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        self.errors += other.errors
        self.warnings += other.warnings
        return self

    def to_dict(self) -> dict[str, Any]:
        """camelCase record used by the JSON outputs."""
        return {
            "isValid": self.is_valid,
            "errors": [vars(error).copy() for error in self.errors],
            "warnings": [vars(warning).copy() for warning in self.warnings],
        }
