"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sinks.application import IncompleteConfigurationError
from sinks.application.config import ConfigError


class InvalidOrderError(Exception):
    """Raised when an order document is structurally inconsistent."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid order: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")} for d in exc.details
                ]
                or None,
            },
        )

    @app.exception_handler(IncompleteConfigurationError)
    async def incomplete_configuration_handler(
        request: Request, exc: IncompleteConfigurationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "incomplete_configuration",
                "details": [field.to_dict() for field in exc.missing_fields],
            },
        )

    @app.exception_handler(InvalidOrderError)
    async def invalid_order_handler(request: Request, exc: InvalidOrderError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Order is invalid",
                "error_type": "invalid_order",
                "details": [{"message": e} for e in exc.errors],
            },
        )
