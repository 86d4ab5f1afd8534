"""Entities for weight goals."""

from .goal import Goal

__all__ = ["Goal"]
