"""FastAPI REST API for sink BOM compilation.

This module provides a REST API for previewing BOMs of single builds,
compiling multi-build orders and validating configurations.

Usage:
    uvicorn sinks.web:app --reload
"""

from sinks.web.app import app, create_app

__all__ = ["app", "create_app"]
