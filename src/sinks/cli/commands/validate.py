"""The ``validate`` command: schema and rule checks without compiling.

Exit codes:
    0 - no findings
    1 - blocking errors (including unreadable or malformed files)
    2 - warnings only; compilation would repair or placeholder these
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from sinks.application.catalog import load_lookup_tables
from sinks.application.config import (
    ConfigError,
    ValidationResult,
    config_to_domain,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON build configuration"),
    ],
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Lookup-table JSON overriding the bundled catalog"),
    ] = None,
) -> None:
    """Check a build configuration for schema and rule problems.

    Reports basin count mismatches, missing dimensions, sink lengths no sink
    body covers, and faucet placements the rule engine would move.

    Example:
        sinks validate build-001.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = config_to_domain(load_config(config_file))
        tables = load_lookup_tables(catalog_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config, tables)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.error_type == "json_parse":
        lines = ["Invalid JSON syntax"]
        lines.extend(
            f"  Line {d.get('line', '?')}, Column {d.get('column', '?')}: {d.get('message', '')}"
            for d in error.details
        )
        return lines
    if error.error_type == "validation":
        lines = []
        for detail in error.details:
            lines.append(f"{detail.get('path', '?')}: {detail.get('message', '')}")
            if detail.get("value") is not None:
                lines.append(f"  Value: {detail['value']!r}")
        return lines
    return [error.message]


def display_load_error(error: ConfigError) -> None:
    """Print a loader failure to stderr, one line per offending field."""
    typer.echo("Errors:", err=True)
    for line in _load_error_lines(error):
        typer.echo(f"  {line}", err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)


def _echo_findings(title: str, findings: list[Any], err: bool) -> None:
    if not findings:
        return
    typer.echo(f"{title}:", err=err)
    for finding in findings:
        typer.echo(f"  {finding.path}: {finding.message}", err=err)
        if getattr(finding, "suggestion", None):
            typer.echo(f"    Suggestion: {finding.suggestion}", err=err)
        elif getattr(finding, "value", None) is not None:
            typer.echo(f"    Value: {finding.value!r}", err=err)
    typer.echo()


def _display_validation_result(result: ValidationResult) -> None:
    _echo_findings("Errors", result.errors, err=True)
    _echo_findings("Warnings", result.warnings, err=False)

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), {len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
