"""Ports for weight goals."""

from .goal_repository import IGoalRepository

__all__ = ["IGoalRepository"]
