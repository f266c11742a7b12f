"""API routers for the REST API."""

from sinks.web.routers.bom import router as bom_router
from sinks.web.routers.catalog import router as catalog_router
from sinks.web.routers.validate import router as validate_router

__all__ = [
    "bom_router",
    "catalog_router",
    "validate_router",
]
