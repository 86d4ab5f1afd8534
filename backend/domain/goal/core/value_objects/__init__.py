"""Value objects for weight goals."""

from .goal_id import GoalId
from .target_date import TargetDate

__all__ = ["GoalId", "TargetDate"]
