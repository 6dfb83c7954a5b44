"""Reusable type definitions for oneshot_tcp."""

from .base import StrictBaseModel

__all__ = [
    "StrictBaseModel",
]
