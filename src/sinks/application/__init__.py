"""Application layer - use cases and orchestration."""

from .commands import CompileBomCommand, CompileOrderCommand, IncompleteConfigurationError
from .completeness import missing_fields
from .dtos import BomResult, MissingField, OrderInput
from .scheduling import LatestResultGate

__all__ = [
    "BomResult",
    "CompileBomCommand",
    "CompileOrderCommand",
    "IncompleteConfigurationError",
    "LatestResultGate",
    "MissingField",
    "OrderInput",
    "missing_fields",
]
