"""Lookup-table loading: bundled catalog data and its schema."""

from sinks.application.catalog.loader import load_lookup_tables, read_default_catalog
from sinks.application.catalog.schema import LookupTablesSchema

__all__ = ["LookupTablesSchema", "load_lookup_tables", "read_default_catalog"]
