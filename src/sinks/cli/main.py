"""Typer CLI for sink BOM compilation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from sinks.application import (
    BomResult,
    CompileBomCommand,
    CompileOrderCommand,
    IncompleteConfigurationError,
)
from sinks.application.catalog import load_lookup_tables
from sinks.application.config import (
    ConfigError,
    config_to_domain,
    load_config,
    load_order,
    order_to_input,
)
from sinks.cli.commands import display_load_error, validate_command
from sinks.domain.services import pegboard_bucket, resolve_pegboard_kit
from sinks.infrastructure.exporters import ExporterRegistry

app = typer.Typer(
    name="sinks",
    help="Compile sink configurations into bills of materials.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log pipeline steps, repairs and resolution warnings"),
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _compile(
    config_file: Path,
    catalog_file: Path | None,
    language: str | None,
    strict: bool,
    is_order: bool,
) -> BomResult:
    tables = load_lookup_tables(catalog_file)
    if is_order:
        order = order_to_input(load_order(config_file))
        if language:
            order.language = language.upper()
        return CompileOrderCommand(tables).execute(order, strict=strict)
    config = config_to_domain(load_config(config_file))
    return CompileBomCommand(tables).execute(config, language=language, strict=strict)


@app.command(name="compile")
def compile_bom(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON build configuration (or order with --order)"),
    ],
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Lookup-table JSON overriding the bundled catalog"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: tree, csv, json, procurement"),
    ] = "tree",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    language: Annotated[
        str | None,
        typer.Option("--language", "-l", help="Manual language (EN, FR, ES)"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail when mandatory fields are missing"),
    ] = False,
    is_order: Annotated[
        bool,
        typer.Option("--order", help="Treat CONFIG_FILE as a multi-build order"),
    ] = False,
) -> None:
    """Compile a configuration into a bill of materials.

    Examples:
        sinks compile build-001.json
        sinks compile build-001.json --format csv --output bom.csv
        sinks compile order.json --order --language FR
    """
    if not ExporterRegistry.is_registered(output_format):
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(ExporterRegistry.available_formats())}", err=True)
        raise typer.Exit(code=1)

    try:
        result = _compile(config_file, catalog_file, language, strict, is_order)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    except IncompleteConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        for field in e.missing_fields:
            typer.echo(f"  {field.path}: {field.label}", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    exporter = ExporterRegistry.get(output_format)()
    if output_file is not None:
        exporter.export(result, output_file)
        typer.echo(f"Wrote {output_format} BOM to {output_file}")
    else:
        typer.echo(exporter.export_string(result), nl=False)

    if result.missing_fields:
        labels = ", ".join(field.label for field in result.missing_fields)
        typer.echo(f"Partial BOM, missing: {labels}", err=True)


@app.command()
def pegboard(
    length: Annotated[float, typer.Argument(help="Sink length in inches")],
    pegboard_type: Annotated[str, typer.Argument(metavar="TYPE", help="PERFORATED or SOLID")],
    color: Annotated[
        str | None,
        typer.Option("--color", "-c", help="Pegboard color (e.g. BLUE)"),
    ] = None,
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Lookup-table JSON overriding the bundled catalog"),
    ] = None,
) -> None:
    """Print the pegboard kit id for a sink length.

    Example:
        sinks pegboard 60 PERFORATED --color BLUE
    """
    try:
        tables = load_lookup_tables(catalog_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    typer.echo(resolve_pegboard_kit(length, pegboard_type, color, tables))
    bucket = pegboard_bucket(length, tables)
    if bucket is not None:
        typer.echo(f"Size bucket: {bucket}")


if __name__ == "__main__":
    app()
