"""Domain exceptions for weight measurements."""

from datetime import datetime

from domain.shared.errors import (
    AuthorizationError,
    NotFoundError,
    PolicyError,
    TrackingError,
    ValidationError,
)


class WeightDomainError(TrackingError):
    """Base exception for weight domain errors."""

    pass


class InvalidWeightValueError(WeightDomainError, ValidationError):
    """Raised when a weight magnitude is outside 10-500 kg."""

    def __init__(self, value: float, reason: str):
        super().__init__(f"Invalid weight {value}: {reason}")
        self.value = value
        self.reason = reason


class InvalidWeightUnitError(WeightDomainError, ValidationError):
    """Raised when a unit is not one of the supported units."""

    def __init__(self, unit: str):
        super().__init__(f"Invalid weight unit: {unit!r}")
        self.unit = unit


class ZeroWeightError(WeightDomainError, ValidationError):
    """Raised when a measurement is built from the unset weight value."""

    def __init__(self) -> None:
        super().__init__("Weight value cannot be zero")


class FutureMeasurementError(WeightDomainError, ValidationError):
    """Raised when a measurement is dated after the end of today."""

    def __init__(self, measured_at: datetime):
        super().__init__(f"Measurement date cannot be in the future: {measured_at.isoformat()}")
        self.measured_at = measured_at


class NaiveMeasurementTimeError(WeightDomainError, ValidationError):
    """Raised when a measurement time carries no timezone."""

    def __init__(self, moment: datetime, field: str = "measured_at"):
        super().__init__(f"{field} must be timezone-aware: {moment.isoformat()}")
        self.moment = moment
        self.field = field


class WeightNotFoundError(WeightDomainError, NotFoundError):
    """Raised when a measurement cannot be found."""

    def __init__(self, weight_id: str):
        super().__init__(f"Weight not found: {weight_id}")
        self.weight_id = weight_id


class NoCurrentWeightError(WeightDomainError, NotFoundError):
    """Raised when a user has no measurement at all."""

    def __init__(self, user_id: str):
        super().__init__(f"No current weight found for user: {user_id}")
        self.user_id = user_id


class WeightOwnershipError(WeightDomainError, AuthorizationError):
    """Raised when a user acts on another user's measurement."""

    def __init__(self, weight_id: str, user_id: str):
        super().__init__(f"Weight {weight_id} does not belong to user {user_id}")
        self.weight_id = weight_id
        self.user_id = user_id


class MaxDailyRecordingsExceededError(WeightDomainError, PolicyError):
    """Raised when the daily measurement cap is reached."""

    def __init__(self, user_id: str, limit: int):
        super().__init__(
            f"Maximum daily weight recordings exceeded for user {user_id} (limit {limit})"
        )
        self.user_id = user_id
        self.limit = limit
