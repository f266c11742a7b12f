"""Pydantic request schemas for the REST API."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class BomPreviewRequest(BaseModel):
    """Request for compiling a single build configuration."""

    config: dict[str, Any] = Field(..., description="Build configuration JSON")
    language: Literal["EN", "FR", "ES"] | None = Field(
        default=None, description="Manual language; no manual kit when omitted"
    )
    strict: bool = Field(default=False, description="Reject incomplete configurations")


class OrderRequest(BaseModel):
    """Request for compiling a multi-build order."""

    order: dict[str, Any] = Field(..., description="Order document JSON")
    strict: bool = Field(default=False, description="Reject orders with incomplete builds")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Build configuration JSON")
