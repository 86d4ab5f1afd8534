"""WeightUnit value object - unit a measurement was entered in."""

from enum import Enum

from ..exceptions.weight_errors import InvalidWeightUnitError


class WeightUnit(str, Enum):
    """Supported weight units.

    - KG: kilograms
    - LB: pounds
    """

    KG = "kg"
    LB = "lb"

    @staticmethod
    def parse(value: str) -> "WeightUnit":
        """Parse a unit string.

        Raises:
            InvalidWeightUnitError: If value is not "kg" or "lb"

        Example:
            >>> WeightUnit.parse("lb")
            <WeightUnit.LB: 'lb'>
        """
        try:
            return WeightUnit(value)
        except ValueError as e:
            raise InvalidWeightUnitError(value) from e

    def __str__(self) -> str:
        return self.value
