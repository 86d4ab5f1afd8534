"""Domain exceptions for weight goals."""

from domain.shared.errors import (
    NotFoundError,
    PolicyError,
    TrackingError,
    ValidationError,
)


class GoalDomainError(TrackingError):
    """Base exception for goal domain errors."""

    pass


class InvalidTargetDateError(GoalDomainError, ValidationError):
    """Raised when (year, month, day) is not a calendar date."""

    def __init__(self, year: int, month: int, day: int):
        super().__init__(f"Invalid date: {year:04d}-{month:02d}-{day:02d}")
        self.year = year
        self.month = month
        self.day = day


class PastTargetDateError(GoalDomainError, ValidationError):
    """Raised when a new target date lies before today."""

    def __init__(self, target: str):
        super().__init__(f"Target date cannot be in the past: {target}")
        self.target = target


class ZeroTargetWeightError(GoalDomainError, ValidationError):
    """Raised when a goal is built without a target weight."""

    def __init__(self) -> None:
        super().__init__("Target weight cannot be zero")


class ZeroTargetDateError(GoalDomainError, ValidationError):
    """Raised when a goal is built without a target date."""

    def __init__(self) -> None:
        super().__init__("Target date cannot be zero")


class GoalNotFoundError(GoalDomainError, NotFoundError):
    """Raised when a goal cannot be found."""

    def __init__(self, goal_id: str):
        super().__init__(f"Goal not found: {goal_id}")
        self.goal_id = goal_id


class NoActiveGoalError(GoalDomainError, NotFoundError):
    """Raised when a user has no active goal."""

    def __init__(self, user_id: str):
        super().__init__(f"No active goal found for user: {user_id}")
        self.user_id = user_id


class ActiveGoalExistsError(GoalDomainError, PolicyError):
    """Raised when setting a goal while another one is active."""

    def __init__(self, user_id: str):
        super().__init__(f"User already has an active goal: {user_id}")
        self.user_id = user_id


class SameWeightError(GoalDomainError, PolicyError):
    """Raised when the target is too close to the current weight."""

    def __init__(self, current_kg: float, target_kg: float):
        super().__init__(
            "Target weight must be different from current weight "
            f"(current {current_kg:.1f}, target {target_kg:.1f})"
        )
        self.current_kg = current_kg
        self.target_kg = target_kg


class UnrealisticGoalError(GoalDomainError, PolicyError):
    """Raised when a goal needs more than the maximum weekly change."""

    def __init__(self, required_per_week: float, max_per_week: float):
        super().__init__(
            f"Goal is unrealistic: requires {required_per_week:.2f} kg/week "
            f"(max {max_per_week:g} kg/week)"
        )
        self.required_per_week = required_per_week
        self.max_per_week = max_per_week
