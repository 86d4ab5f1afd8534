"""Domain exceptions for weight goals."""

from .goal_errors import (
    ActiveGoalExistsError,
    GoalDomainError,
    GoalNotFoundError,
    InvalidTargetDateError,
    NoActiveGoalError,
    PastTargetDateError,
    SameWeightError,
    UnrealisticGoalError,
    ZeroTargetDateError,
    ZeroTargetWeightError,
)

__all__ = [
    "GoalDomainError",
    "InvalidTargetDateError",
    "PastTargetDateError",
    "ZeroTargetWeightError",
    "ZeroTargetDateError",
    "GoalNotFoundError",
    "NoActiveGoalError",
    "ActiveGoalExistsError",
    "SameWeightError",
    "UnrealisticGoalError",
]
