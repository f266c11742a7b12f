"""Pydantic schemas for the REST API."""

from sinks.web.schemas.requests import (
    BomPreviewRequest,
    ConfigValidateRequest,
    OrderRequest,
)
from sinks.web.schemas.responses import (
    BomNodeSchema,
    BomResultSchema,
    MissingFieldSchema,
    RepairSchema,
    SinkModelInfoSchema,
    SinkModelListSchema,
    ValidationResultSchema,
    WarningSchema,
)

__all__ = [
    # Requests
    "BomPreviewRequest",
    "ConfigValidateRequest",
    "OrderRequest",
    # Responses
    "BomNodeSchema",
    "BomResultSchema",
    "MissingFieldSchema",
    "RepairSchema",
    "SinkModelInfoSchema",
    "SinkModelListSchema",
    "ValidationResultSchema",
    "WarningSchema",
]
