"""FastAPI dependency injection for BOM compilation."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from sinks.application import CompileBomCommand, CompileOrderCommand
from sinks.application.catalog import load_lookup_tables
from sinks.domain import LookupTables


@lru_cache(maxsize=1)
def get_lookup_tables() -> LookupTables:
    """Bundled lookup tables, loaded once per process."""
    return load_lookup_tables()


def get_compile_command(
    tables: Annotated[LookupTables, Depends(get_lookup_tables)],
) -> CompileBomCommand:
    return CompileBomCommand(tables)


def get_order_command(
    tables: Annotated[LookupTables, Depends(get_lookup_tables)],
) -> CompileOrderCommand:
    return CompileOrderCommand(tables)


# Type aliases for cleaner endpoint signatures
LookupTablesDep = Annotated[LookupTables, Depends(get_lookup_tables)]
CompileCommandDep = Annotated[CompileBomCommand, Depends(get_compile_command)]
OrderCommandDep = Annotated[CompileOrderCommand, Depends(get_order_command)]
