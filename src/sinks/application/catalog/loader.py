"""Loading of lookup tables.

The default tables ship as package data and are read with importlib.resources;
callers may pass an override file instead. Tables are loaded once and then
shared by every compilation.
"""

import json
import logging
from importlib import resources
from pathlib import Path

from sinks.application.catalog.schema import LookupTablesSchema
from sinks.application.config.loader import ConfigError, read_json, validate_document
from sinks.domain.catalog import LookupTables

logger = logging.getLogger(__name__)

DATA_PACKAGE = "sinks.application.catalog"
DEFAULT_CATALOG = "data/catalog.json"


def read_default_catalog() -> str:
    """Return the bundled catalog JSON text.

    Raises:
        ConfigError: If the bundled catalog is missing from the installation.
    """
    try:
        return resources.files(DATA_PACKAGE).joinpath(DEFAULT_CATALOG).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(
            message=f"Bundled catalog not found: {DEFAULT_CATALOG}",
            error_type="file_not_found",
        ) from e


def load_lookup_tables(path: Path | None = None) -> LookupTables:
    """Load and validate lookup tables.

    Args:
        path: Catalog JSON file; the bundled catalog when None.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    if path is None:
        try:
            data = json.loads(read_default_catalog())
        except json.JSONDecodeError as e:
            raise ConfigError(
                message=f"Invalid JSON in bundled catalog (line {e.lineno}, column {e.colno}): {e.msg}",
                error_type="json_parse",
            )
    else:
        data = read_json(path)

    schema = validate_document(LookupTablesSchema, data, path, label="Catalog")
    tables = schema.to_tables()
    logger.debug(
        f"Loaded catalog {schema.version} from {path or 'package data'}: "
        f"{len(tables.items)} items, {len(tables.sink_models)} sink models"
    )
    return tables
