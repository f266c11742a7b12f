"""Contracts module - protocols shared across layers.

By depending on protocols rather than concrete implementations, layers remain
loosely coupled and testable.
"""

from .validators import Validator as Validator

__all__ = ["Validator"]
