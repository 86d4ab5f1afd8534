"""WeightTracker - recording, history and trend of weight measurements."""

import calendar
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Tuple

from domain.shared.errors import RepositoryError
from domain.shared.identifiers import generate_entity_id
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserNotActiveError, UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId
from domain.weight.core.entities.weight import Weight
from domain.weight.core.exceptions.weight_errors import (
    MaxDailyRecordingsExceededError,
    NaiveMeasurementTimeError,
    NoCurrentWeightError,
    WeightNotFoundError,
    WeightOwnershipError,
)
from domain.weight.core.ports.weight_repository import IWeightRepository
from domain.weight.core.value_objects.weight_id import WeightId
from domain.weight.core.value_objects.weight_unit import WeightUnit
from domain.weight.core.value_objects.weight_value import WeightValue

logger = logging.getLogger(__name__)

MAX_DAILY_RECORDINGS = 10
DEFAULT_RECENT_LIMIT = 10
TREND_NOISE_KG = 0.1
HISTORY_FLOOR = datetime(2020, 1, 1, tzinfo=timezone.utc)


class TimePeriod(str, Enum):
    """History windows, all ending now."""

    LAST_WEEK = "last_week"
    LAST_MONTH = "last_month"
    LAST_3_MONTHS = "last_3_months"
    LAST_6_MONTHS = "last_6_months"
    LAST_YEAR = "last_year"
    ALL = "all"


class TrendDirection(str, Enum):
    """Direction of weight change over a window.

    Changes within ±0.1 kg count as STABLE.
    """

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"
    NO_DATA = "no_data"


@dataclass(frozen=True)
class WeightTrend:
    """Weight change over a time window.

    Attributes:
        direction: Sign of the change (or NO_DATA with fewer than 2 points)
        total_change: Absolute change between first and last measurement
        average_change_per_week: Signed change per week
        start_weight: First measurement in the window
        end_weight: Last measurement in the window
        data_points: Number of measurements in the window
    """

    direction: TrendDirection
    total_change: WeightValue
    average_change_per_week: float
    start_weight: WeightValue
    end_weight: WeightValue
    data_points: int

    @staticmethod
    def no_data(data_points: int) -> "WeightTrend":
        return WeightTrend(
            direction=TrendDirection.NO_DATA,
            total_change=WeightValue.zero(),
            average_change_per_week=0.0,
            start_weight=WeightValue.zero(),
            end_weight=WeightValue.zero(),
            data_points=data_points,
        )


def _months_before(moment: datetime, months: int) -> datetime:
    """Same time ``months`` calendar months earlier, day clamped to month end."""
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def period_bounds(period: TimePeriod, now: datetime) -> Tuple[datetime, datetime]:
    """Return the ``(from, to)`` window of a period ending at ``now``."""
    if period == TimePeriod.LAST_WEEK:
        return now - timedelta(days=7), now
    if period == TimePeriod.LAST_MONTH:
        return _months_before(now, 1), now
    if period == TimePeriod.LAST_3_MONTHS:
        return _months_before(now, 3), now
    if period == TimePeriod.LAST_6_MONTHS:
        return _months_before(now, 6), now
    if period == TimePeriod.LAST_YEAR:
        return _months_before(now, 12), now
    return HISTORY_FLOOR, now


@dataclass
class WeightTracker:
    """Weight tracking service.

    Stateless: every call reads and writes through the repositories.

    Examples:
        >>> tracker = WeightTracker(user_repository, weight_repository)
        >>> weight = await tracker.record_weight(
        ...     UserId("giada"), WeightValue.create(70.5), WeightUnit.KG, now, "")
    """

    user_repository: IUserRepository
    weight_repository: IWeightRepository

    async def record_weight(
        self,
        user_id: UserId,
        value: WeightValue,
        unit: WeightUnit,
        measured_at: datetime,
        notes: str = "",
    ) -> Weight:
        """Record a new measurement.

        Args:
            user_id: User recording the weight
            value: Validated weight
            unit: Entry unit
            measured_at: Measurement time (not after the end of today)
            notes: Optional notes

        Returns:
            Weight: Saved measurement

        Raises:
            UserNotFoundError: If user doesn't exist
            UserNotActiveError: If user is deactivated
            MaxDailyRecordingsExceededError: If the user already has 10
                measurements on that calendar day
            NaiveMeasurementTimeError: If measured_at has no timezone
            FutureMeasurementError: If measured_at is after today
            RepositoryError: If storage fails
        """
        user = await self._require_user(user_id)
        if not user.is_active:
            raise UserNotActiveError(str(user_id))

        if measured_at.tzinfo is None:
            raise NaiveMeasurementTimeError(measured_at)

        day_start = measured_at.replace(hour=0, minute=0, second=0, microsecond=0)
        try:
            daily_count = await self.weight_repository.count_by_user_id_and_date(
                user_id, day_start
            )
        except RepositoryError as e:
            raise RepositoryError(f"failed to check daily recording count: {e}") from e

        if daily_count >= MAX_DAILY_RECORDINGS:
            logger.warning(
                "Daily weight recording limit reached",
                extra={"user_id": str(user_id), "day": day_start.date().isoformat()},
            )
            raise MaxDailyRecordingsExceededError(str(user_id), MAX_DAILY_RECORDINGS)

        weight = Weight.create(
            weight_id=generate_entity_id("weight", str(user_id)),
            user_id=user_id,
            value=value,
            unit=unit,
            measured_at=measured_at,
            notes=notes,
        )

        try:
            await self.weight_repository.save(weight)
        except RepositoryError as e:
            raise RepositoryError(f"failed to save weight record: {e}") from e

        logger.info(
            "Weight recorded",
            extra={
                "user_id": str(user_id),
                "weight_id": str(weight.weight_id),
                "value_kg": weight.value.kg,
            },
        )
        return weight

    async def get_weight_history(self, user_id: UserId, period: TimePeriod) -> List[Weight]:
        """Measurements of a user within a period, oldest first."""
        from_, to = period_bounds(period, datetime.now(timezone.utc))
        try:
            return await self.weight_repository.find_by_user_id_and_period(user_id, from_, to)
        except RepositoryError as e:
            raise RepositoryError(f"failed to retrieve weight history: {e}") from e

    async def get_recent_weights(
        self, user_id: UserId, limit: int = DEFAULT_RECENT_LIMIT
    ) -> List[Weight]:
        """Most recent measurements, newest first.

        Non-positive limits fall back to 10.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        await self._require_user(user_id)
        if limit <= 0:
            limit = DEFAULT_RECENT_LIMIT
        try:
            return await self.weight_repository.find_by_user_id(user_id, limit)
        except RepositoryError as e:
            raise RepositoryError(f"failed to retrieve recent weights: {e}") from e

    async def get_latest_weight(self, user_id: UserId) -> Weight:
        """Most recent measurement of a user.

        Raises:
            UserNotFoundError: If user doesn't exist
            NoCurrentWeightError: If the user has no measurement
        """
        await self._require_user(user_id)
        try:
            weight = await self.weight_repository.find_latest_by_user_id(user_id)
        except RepositoryError as e:
            raise RepositoryError(f"failed to retrieve latest weight: {e}") from e

        if weight is None:
            raise NoCurrentWeightError(str(user_id))
        return weight

    async def calculate_weight_trend(self, user_id: UserId, period: TimePeriod) -> WeightTrend:
        """Direction and rate of weight change over a period.

        Fewer than two measurements yield a NO_DATA trend, not an error.
        """
        weights = await self.get_weight_history(user_id, period)
        if len(weights) < 2:
            return WeightTrend.no_data(len(weights))

        first, last = weights[0], weights[-1]
        total_change = last.value.subtract(first.value)

        days_diff = (last.measured_at - first.measured_at).total_seconds() / 86400
        weeks_diff = days_diff / 7

        average_per_week = 0.0
        if weeks_diff > 0:
            average_per_week = total_change.kg / weeks_diff

        if total_change.kg > TREND_NOISE_KG:
            direction = TrendDirection.INCREASING
        elif total_change.kg < -TREND_NOISE_KG:
            direction = TrendDirection.DECREASING
        else:
            direction = TrendDirection.STABLE

        return WeightTrend(
            direction=direction,
            total_change=WeightValue(abs(total_change.kg)),
            average_change_per_week=average_per_week,
            start_weight=first.value,
            end_weight=last.value,
            data_points=len(weights),
        )

    async def delete_weight(self, user_id: UserId, weight_id: WeightId) -> None:
        """Delete one of the user's own measurements.

        Raises:
            UserNotFoundError: If user doesn't exist
            WeightNotFoundError: If the measurement doesn't exist
            WeightOwnershipError: If it belongs to another user
        """
        await self._require_user(user_id)

        try:
            weight = await self.weight_repository.find_by_id(weight_id)
        except RepositoryError as e:
            raise RepositoryError(f"failed to load weight: {e}") from e

        if weight is None:
            raise WeightNotFoundError(str(weight_id))

        if weight.user_id != user_id:
            logger.warning(
                "Cross-user weight deletion refused",
                extra={"user_id": str(user_id), "weight_id": str(weight_id)},
            )
            raise WeightOwnershipError(str(weight_id), str(user_id))

        try:
            deleted = await self.weight_repository.delete(weight_id)
        except RepositoryError as e:
            raise RepositoryError(f"failed to delete weight: {e}") from e

        if not deleted:
            raise WeightNotFoundError(str(weight_id))

    async def _require_user(self, user_id: UserId) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user
