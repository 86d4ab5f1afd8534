"""WeightValue value object - body weight magnitude in kilograms."""

from dataclasses import dataclass

from ..exceptions.weight_errors import InvalidWeightValueError

MIN_WEIGHT_KG = 10.0
MAX_WEIGHT_KG = 500.0


@dataclass(frozen=True)
class WeightValue:
    """Weight magnitude in kilograms.

    Use ``WeightValue.create()`` for anything entered by a user: it enforces
    the 10-500 kg range. The plain constructor does not validate and is meant
    for deltas (``subtract``) and derived rates. Zero is the "unset" sentinel.

    Attributes:
        kg: Magnitude in kilograms

    Example:
        >>> WeightValue.create(72.0).subtract(WeightValue.create(69.0))
        WeightValue(kg=3.0)
    """

    kg: float = 0.0

    @staticmethod
    def create(value: float) -> "WeightValue":
        """Build a validated weight.

        Args:
            value: Magnitude in kilograms

        Returns:
            WeightValue: Validated weight

        Raises:
            InvalidWeightValueError: If value is not positive, below 10 kg
                or above 500 kg
        """
        if value <= 0:
            raise InvalidWeightValueError(value, "weight must be positive")
        if value < MIN_WEIGHT_KG:
            raise InvalidWeightValueError(value, f"weight must be at least {MIN_WEIGHT_KG:g}kg")
        if value > MAX_WEIGHT_KG:
            raise InvalidWeightValueError(value, f"weight must be at most {MAX_WEIGHT_KG:g}kg")
        return WeightValue(float(value))

    @staticmethod
    def zero() -> "WeightValue":
        """The unset weight."""
        return WeightValue(0.0)

    def is_zero(self) -> bool:
        return self.kg == 0

    def subtract(self, other: "WeightValue") -> "WeightValue":
        """Difference ``self - other``, not range-checked."""
        return WeightValue(self.kg - other.kg)

    def add(self, other: "WeightValue") -> "WeightValue":
        """Sum of both weights, validated like ``create``.

        Raises:
            InvalidWeightValueError: If the sum leaves the valid range
        """
        return WeightValue.create(self.kg + other.kg)

    def __float__(self) -> float:
        return self.kg

    def __str__(self) -> str:
        """One-decimal rendering, e.g. ``70.5``."""
        return f"{self.kg:.1f}"
