"""Loading of build configuration and order documents.

Documents are JSON files validated against the pydantic schemas. Every
failure surfaces as a ``ConfigError`` carrying an error category and, for
validation failures, one detail entry per offending field with its JSON path.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from sinks.application.config.schemas import OrderSchema, SinkConfigurationSchema

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ConfigError(Exception):
    """Raised when a configuration, order or catalog document cannot be used.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation)
        path: Path to the document (if loaded from a file)
        details: Additional error details (line/column for JSON, field errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location tuple as a JSON path string.

    Examples:
        >>> format_json_path(("basins", 0, "customWidth"))
        'basins[0].customWidth'
        >>> format_json_path(("configurations", "001", "length"))
        'configurations.001.length'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    """One detail dict (path, message, value, error_type) per pydantic error."""
    return [
        {
            "path": format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]], label: str) -> str:
    lines = [f"{label} validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def read_json(path: Path) -> Any:
    """Read and parse a JSON document.

    Raises:
        ConfigError: With error_type file_not_found, permission_denied,
            file_read_error or json_parse.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def validate_document(
    schema: type[SchemaT],
    data: Any,
    path: Path | None = None,
    label: str = "Configuration",
) -> SchemaT:
    """Validate parsed JSON against ``schema``.

    Raises:
        ConfigError: With error_type validation and one detail per field.
    """
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details, label),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> SinkConfigurationSchema:
    """Load and validate a build configuration from a JSON file.

    Example:
        >>> try:
        ...     config = load_config(Path("build-001.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    return validate_document(SinkConfigurationSchema, read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> SinkConfigurationSchema:
    """Validate a build configuration supplied as a dictionary (API requests)."""
    return validate_document(SinkConfigurationSchema, data)


def load_order(path: Path) -> OrderSchema:
    """Load and validate a multi-build order document from a JSON file."""
    return validate_document(OrderSchema, read_json(path), path, label="Order")


def load_order_from_dict(data: dict[str, Any]) -> OrderSchema:
    return validate_document(OrderSchema, data, label="Order")
