"""Entities for weight measurements."""

from .weight import Weight

__all__ = ["Weight"]
