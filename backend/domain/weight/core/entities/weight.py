"""Weight entity - single body-weight measurement."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from domain.user.core.value_objects.user_id import UserId

from ..exceptions.weight_errors import (
    FutureMeasurementError,
    NaiveMeasurementTimeError,
    ZeroWeightError,
)
from ..value_objects.weight_id import WeightId
from ..value_objects.weight_unit import WeightUnit
from ..value_objects.weight_value import WeightValue

RECENT_WINDOW = timedelta(days=7)


@dataclass
class Weight:
    """Point-in-time body-weight measurement of one user.

    The owning user is referenced by id only. ``notes`` is the only field
    that may change after creation.

    Attributes:
        weight_id: Unique identifier for this measurement
        user_id: Owning user
        value: Measured weight (never zero)
        unit: Unit the user entered the weight in
        measured_at: When the measurement was taken
        notes: Optional free-text notes
        created_at: When the record was created
    """

    weight_id: WeightId
    user_id: UserId
    value: WeightValue
    unit: WeightUnit
    measured_at: datetime
    notes: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate measurement data.

        Raises:
            ZeroWeightError: If value is the unset weight
        """
        if self.value.is_zero():
            raise ZeroWeightError()

    @staticmethod
    def create(
        weight_id: str,
        user_id: UserId,
        value: WeightValue,
        unit: WeightUnit,
        measured_at: datetime,
        notes: str = "",
    ) -> "Weight":
        """Factory method for a new measurement.

        Measurements later today are accepted, anything after the end of
        today (in the timezone of ``measured_at``) is rejected.

        Args:
            weight_id: Identifier (non-blank)
            user_id: Owning user
            value: Validated weight
            unit: Entry unit
            measured_at: Measurement time
            notes: Optional notes

        Returns:
            Weight: New measurement

        Raises:
            InvalidIdentifierError: If weight_id is blank
            NaiveMeasurementTimeError: If measured_at has no timezone
            ZeroWeightError: If value is zero
            FutureMeasurementError: If measured after the end of today
        """
        if measured_at.tzinfo is None:
            raise NaiveMeasurementTimeError(measured_at)

        now = datetime.now(measured_at.tzinfo)
        end_of_today = now.replace(hour=23, minute=59, second=59, microsecond=999999)
        if measured_at > end_of_today:
            raise FutureMeasurementError(measured_at)

        return Weight(
            weight_id=WeightId(weight_id),
            user_id=user_id,
            value=value,
            unit=unit,
            measured_at=measured_at,
            notes=notes,
        )

    @staticmethod
    def restore(
        weight_id: str,
        user_id: str,
        value: float,
        unit: str,
        measured_at: datetime,
        notes: str,
        created_at: datetime,
    ) -> "Weight":
        """Rebuild a stored measurement from raw fields.

        Skips the future-date rule but re-validates every value object, so a
        corrupt row raises instead of producing an invalid entity.
        """
        return Weight(
            weight_id=WeightId(weight_id),
            user_id=UserId(user_id),
            value=WeightValue.create(value),
            unit=WeightUnit.parse(unit),
            measured_at=measured_at,
            notes=notes or "",
            created_at=created_at,
        )

    def update_notes(self, notes: str) -> None:
        self.notes = notes

    def is_recent(self) -> bool:
        """Measured within the last seven days."""
        return self.measured_at > datetime.now(self.measured_at.tzinfo) - RECENT_WINDOW

    def is_same_day(self, moment: datetime) -> bool:
        """Same calendar date as ``moment``."""
        return self.measured_at.date() == moment.date()

    def __eq__(self, other: object) -> bool:
        """Equality based on weight_id (entity identity)."""
        if not isinstance(other, Weight):
            return False
        return self.weight_id == other.weight_id

    def __hash__(self) -> int:
        return hash(self.weight_id)
