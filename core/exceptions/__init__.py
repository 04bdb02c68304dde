"""
core.exceptions — Re-exports for convenient imports.

Usage::

    from core.exceptions import ValidationError, NotFoundError
    from core.exceptions import wardrobe_exception_handler
"""

from .base import (
    WardrobeError,
    ValidationError,
    NotFoundError,
)

from .handlers import wardrobe_exception_handler

__all__ = [
    # Base
    "WardrobeError",
    # Client
    "ValidationError",
    "NotFoundError",
    # Handler
    "wardrobe_exception_handler",
]
