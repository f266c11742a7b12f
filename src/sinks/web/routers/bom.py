"""BOM compilation endpoints."""

from fastapi import APIRouter, Query

from sinks.application import BomResult
from sinks.application.config import (
    config_to_domain,
    load_config_from_dict,
    load_order_from_dict,
    order_to_input,
)
from sinks.web.dependencies import CompileCommandDep, OrderCommandDep
from sinks.web.exceptions import InvalidOrderError
from sinks.web.schemas.requests import BomPreviewRequest, OrderRequest
from sinks.web.schemas.responses import BomResultSchema

router = APIRouter(prefix="/bom", tags=["bom"])


def _to_schema(result: BomResult) -> BomResultSchema:
    return BomResultSchema.model_validate(result.to_dict())


@router.post("/preview", response_model=BomResultSchema)
async def preview_bom(
    request: BomPreviewRequest,
    command: CompileCommandDep,
    strict: bool = Query(default=False, description="Reject incomplete configurations"),
) -> BomResultSchema:
    """Compile one build configuration.

    Incomplete configurations return a partial BOM with ``missingFields``
    unless strict mode is requested, in which case they are rejected with
    422.
    """
    config = config_to_domain(load_config_from_dict(request.config))
    result = command.execute(config, language=request.language, strict=strict or request.strict)
    return _to_schema(result)


@router.post("/order", response_model=BomResultSchema)
async def compile_order(
    request: OrderRequest,
    command: OrderCommandDep,
    strict: bool = Query(default=False, description="Reject orders with incomplete builds"),
) -> BomResultSchema:
    """Compile every build of an order into one combined BOM."""
    order = order_to_input(load_order_from_dict(request.order))
    errors = order.validate()
    if errors:
        raise InvalidOrderError(errors)
    result = command.execute(order, strict=strict or request.strict)
    return _to_schema(result)
