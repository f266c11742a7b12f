"""Configuration validation endpoints."""

from fastapi import APIRouter

from sinks.application.config import config_to_domain, load_config_from_dict, validate_config
from sinks.web.dependencies import LookupTablesDep
from sinks.web.schemas.requests import ConfigValidateRequest
from sinks.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
    tables: LookupTablesDep,
) -> ValidationResultSchema:
    """Validate a build configuration without compiling it.

    Schema failures are reported through the ConfigError handler (422).
    """
    config = config_to_domain(load_config_from_dict(request.config))
    result = validate_config(config, tables)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
