"""TargetDate value object - deadline of a goal."""

from dataclasses import dataclass
from datetime import date, datetime, timezone

from ..exceptions.goal_errors import InvalidTargetDateError, PastTargetDateError


def _today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class TargetDate:
    """Calendar date a goal should be reached by.

    ``create()`` is for new goals and refuses past dates. ``restore()`` is
    for goals loaded from storage, whose deadline may have passed since.
    "Today" is the UTC calendar date, evaluated on every call.

    The default instance (all zeros) is the unset date.

    Example:
        >>> str(TargetDate.restore(2025, 3, 9))
        '09/03/2025'
    """

    year: int = 0
    month: int = 0
    day: int = 0

    @staticmethod
    def create(year: int, month: int, day: int) -> "TargetDate":
        """Build a target date for a new goal.

        Raises:
            InvalidTargetDateError: If the triple is not a calendar date
                (e.g. 30 February)
            PastTargetDateError: If the date is before today
        """
        target = TargetDate.restore(year, month, day)
        if target.to_date() < _today():
            raise PastTargetDateError(str(target))
        return target

    @staticmethod
    def restore(year: int, month: int, day: int) -> "TargetDate":
        """Rebuild a stored target date, past dates allowed.

        Raises:
            InvalidTargetDateError: If the triple is not a calendar date
        """
        try:
            date(year, month, day)
        except (ValueError, TypeError, OverflowError) as e:
            raise InvalidTargetDateError(year, month, day) from e
        return TargetDate(year, month, day)

    @staticmethod
    def from_date(value: date) -> "TargetDate":
        """Target date for a new goal from a ``date``."""
        return TargetDate.create(value.year, value.month, value.day)

    def is_zero(self) -> bool:
        return self.year == 0 and self.month == 0 and self.day == 0

    def is_past(self) -> bool:
        """Strictly before today."""
        return self.to_date() < _today()

    def days_until(self) -> int:
        """Whole days from today to the target, negative once passed."""
        return (self.to_date() - _today()).days

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_datetime(self) -> datetime:
        """Midnight UTC on the target date."""
        return datetime(self.year, self.month, self.day, tzinfo=timezone.utc)

    def __str__(self) -> str:
        """``DD/MM/YYYY`` rendering."""
        return f"{self.day:02d}/{self.month:02d}/{self.year:04d}"
