"""Value objects for weight measurements."""

from .weight_id import WeightId
from .weight_unit import WeightUnit
from .weight_value import MAX_WEIGHT_KG, MIN_WEIGHT_KG, WeightValue

__all__ = [
    "WeightId",
    "WeightUnit",
    "WeightValue",
    "MIN_WEIGHT_KG",
    "MAX_WEIGHT_KG",
]
