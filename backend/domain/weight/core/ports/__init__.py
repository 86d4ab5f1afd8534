"""Ports for weight measurements."""

from .weight_repository import IWeightRepository

__all__ = ["IWeightRepository"]
