"""CLI subcommands."""

from .validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
