"""Domain exceptions for weight measurements."""

from .weight_errors import (
    FutureMeasurementError,
    InvalidWeightUnitError,
    InvalidWeightValueError,
    MaxDailyRecordingsExceededError,
    NaiveMeasurementTimeError,
    NoCurrentWeightError,
    WeightDomainError,
    WeightNotFoundError,
    WeightOwnershipError,
    ZeroWeightError,
)

__all__ = [
    "WeightDomainError",
    "InvalidWeightValueError",
    "InvalidWeightUnitError",
    "ZeroWeightError",
    "FutureMeasurementError",
    "NaiveMeasurementTimeError",
    "WeightNotFoundError",
    "NoCurrentWeightError",
    "WeightOwnershipError",
    "MaxDailyRecordingsExceededError",
]
