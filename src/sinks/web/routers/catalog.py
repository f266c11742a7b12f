"""Catalog lookup endpoints."""

from fastapi import APIRouter

from sinks.web.dependencies import LookupTablesDep
from sinks.web.schemas.responses import SinkModelInfoSchema, SinkModelListSchema

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/sink-models", response_model=SinkModelListSchema)
async def list_sink_models(tables: LookupTablesDep) -> SinkModelListSchema:
    """List the sink models with their fixed basin counts."""
    return SinkModelListSchema(
        sink_models=[
            SinkModelInfoSchema(id=model.id, name=model.name, basin_count=model.basin_count)
            for model in tables.sink_models.values()
        ]
    )
