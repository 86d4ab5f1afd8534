"""GoalTracker - weight goals and progress towards them."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from domain.goal.core.entities.goal import Goal
from domain.goal.core.exceptions.goal_errors import (
    ActiveGoalExistsError,
    GoalNotFoundError,
    NoActiveGoalError,
    SameWeightError,
    UnrealisticGoalError,
)
from domain.goal.core.ports.goal_repository import IGoalRepository
from domain.goal.core.value_objects.goal_id import GoalId
from domain.goal.core.value_objects.target_date import TargetDate
from domain.shared.errors import RepositoryError
from domain.shared.identifiers import generate_entity_id
from domain.user.core.exceptions.user_errors import UserNotActiveError, UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId
from domain.weight.core.entities.weight import Weight
from domain.weight.core.exceptions.weight_errors import (
    NaiveMeasurementTimeError,
    NoCurrentWeightError,
)
from domain.weight.core.ports.weight_repository import IWeightRepository
from domain.weight.core.value_objects.weight_unit import WeightUnit
from domain.weight.core.value_objects.weight_value import WeightValue

logger = logging.getLogger(__name__)

MIN_WEIGHT_DIFFERENCE_KG = 0.1
MAX_WEEKLY_CHANGE_KG = 2.0
ON_TRACK_DAILY_KG = 0.3
STARTING_WEIGHT_WINDOW = timedelta(days=7)


@dataclass(frozen=True)
class GoalProgress:
    """Progress snapshot of the active goal.

    Attributes:
        goal: Active goal
        current_weight: Latest measurement
        weight_to_lose: Absolute distance between current and target weight
        days_remaining: Days until the target date (negative once passed)
        weight_per_day: Required daily change to hit the target in time
        progress_percent: Rough progress indicator, 0-100
        is_on_track: Required daily change is at most 0.3 kg
    """

    goal: Goal
    current_weight: WeightValue
    weight_to_lose: WeightValue
    days_remaining: int
    weight_per_day: float
    progress_percent: float
    is_on_track: bool


def _progress_percent(distance_kg: float) -> float:
    """Linear placeholder: 10 kg or more away is 0 %, on target is 100 %.

    A zero distance reports 0 rather than 100.
    """
    if distance_kg <= 0:
        return 0.0
    return max(0.0, (1 - distance_kg / 10) * 100)


@dataclass
class GoalTracker:
    """Weight goal service.

    At most one active goal per user. The active-goal lookup and the save in
    ``set_goal`` are separate repository calls without a lock, so two
    concurrent requests for the same user can both succeed.
    """

    user_repository: IUserRepository
    weight_repository: IWeightRepository
    goal_repository: IGoalRepository

    async def set_goal(
        self,
        user_id: UserId,
        target_weight: WeightValue,
        unit: WeightUnit,
        target_date: TargetDate,
        description: str = "",
    ) -> Goal:
        """Create a new active goal.

        Checks run in order and stop at the first failure.

        Args:
            user_id: Owning user
            target_weight: Weight to reach
            unit: Entry unit
            target_date: Deadline (from ``TargetDate.create``)
            description: Optional description

        Returns:
            Goal: Saved goal

        Raises:
            UserNotFoundError: If user doesn't exist
            UserNotActiveError: If user is deactivated
            NoCurrentWeightError: If the user never recorded a weight
            SameWeightError: If target is within 0.1 kg of the current weight
            ActiveGoalExistsError: If another goal is active
            UnrealisticGoalError: If more than 2 kg/week would be needed
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        if not user.is_active:
            raise UserNotActiveError(str(user_id))

        try:
            current = await self.weight_repository.find_latest_by_user_id(user_id)
        except RepositoryError as e:
            raise RepositoryError(f"failed to get current weight: {e}") from e
        if current is None:
            raise NoCurrentWeightError(str(user_id))

        difference = abs(target_weight.kg - current.value.kg)
        if difference < MIN_WEIGHT_DIFFERENCE_KG:
            raise SameWeightError(current.value.kg, target_weight.kg)

        try:
            existing = await self.goal_repository.find_active_by_user_id(user_id)
        except RepositoryError as e:
            raise RepositoryError(f"failed to check active goal: {e}") from e
        if existing is not None:
            logger.warning(
                "Goal refused, another goal is active",
                extra={"user_id": str(user_id), "goal_id": str(existing.goal_id)},
            )
            raise ActiveGoalExistsError(str(user_id))

        weeks = target_date.days_until() / 7
        if weeks <= 0:
            raise UnrealisticGoalError(float("inf"), MAX_WEEKLY_CHANGE_KG)
        required_per_week = difference / weeks
        if required_per_week > MAX_WEEKLY_CHANGE_KG:
            logger.warning(
                "Unrealistic goal refused",
                extra={"user_id": str(user_id), "required_per_week": required_per_week},
            )
            raise UnrealisticGoalError(required_per_week, MAX_WEEKLY_CHANGE_KG)

        goal = Goal.create(
            goal_id=generate_entity_id("goal", str(user_id)),
            user_id=user_id,
            target_weight=target_weight,
            unit=unit,
            target_date=target_date,
            description=description,
        )

        try:
            await self.goal_repository.save(goal)
        except RepositoryError as e:
            raise RepositoryError(f"failed to save goal: {e}") from e

        logger.info(
            "Goal set",
            extra={
                "user_id": str(user_id),
                "goal_id": str(goal.goal_id),
                "target_kg": target_weight.kg,
                "target_date": str(target_date),
            },
        )
        return goal

    async def get_active_goal(self, user_id: UserId) -> Goal:
        """Active goal of a user.

        Raises:
            NoActiveGoalError: If the user has no active goal
        """
        try:
            goal = await self.goal_repository.find_active_by_user_id(user_id)
        except RepositoryError as e:
            raise RepositoryError(f"failed to retrieve active goal: {e}") from e
        if goal is None:
            raise NoActiveGoalError(str(user_id))
        return goal

    async def get_starting_weight_for_goal(
        self, user_id: UserId, goal_created_at: datetime
    ) -> Weight:
        """Measurement closest to when a goal was created.

        Looks one week either side of ``goal_created_at``. Ties go to the
        earlier measurement. Without candidates falls back to the latest
        measurement, which may post-date the goal.

        Raises:
            NaiveMeasurementTimeError: If goal_created_at has no timezone
            NoCurrentWeightError: If the user has no measurement at all
        """
        if goal_created_at.tzinfo is None:
            raise NaiveMeasurementTimeError(goal_created_at, field="goal_created_at")

        from_ = goal_created_at - STARTING_WEIGHT_WINDOW
        to = goal_created_at + STARTING_WEIGHT_WINDOW
        try:
            candidates = await self.weight_repository.find_by_user_id_and_period(
                user_id, from_, to
            )
        except RepositoryError as e:
            raise RepositoryError(f"failed to retrieve weights around goal: {e}") from e

        if not candidates:
            try:
                latest = await self.weight_repository.find_latest_by_user_id(user_id)
            except RepositoryError as e:
                raise RepositoryError(f"failed to get current weight: {e}") from e
            if latest is None:
                raise NoCurrentWeightError(str(user_id))
            return latest

        # candidates are oldest first, min() keeps the first of equal distances
        return min(candidates, key=lambda w: abs(w.measured_at - goal_created_at))

    async def calculate_progress(self, user_id: UserId) -> GoalProgress:
        """Progress of the active goal against the latest measurement.

        Raises:
            NoActiveGoalError: If the user has no active goal
            NoCurrentWeightError: If the user has no measurement
        """
        goal = await self.get_active_goal(user_id)

        try:
            current = await self.weight_repository.find_latest_by_user_id(user_id)
        except RepositoryError as e:
            raise RepositoryError(f"failed to get current weight: {e}") from e
        if current is None:
            raise NoCurrentWeightError(str(user_id))

        weight_to_lose = current.value.subtract(goal.target_weight)
        distance = abs(weight_to_lose.kg)
        days_remaining = goal.days_remaining()

        weight_per_day = 0.0
        if days_remaining > 0:
            weight_per_day = distance / days_remaining

        return GoalProgress(
            goal=goal,
            current_weight=current.value,
            weight_to_lose=WeightValue(distance),
            days_remaining=days_remaining,
            weight_per_day=weight_per_day,
            progress_percent=_progress_percent(distance),
            is_on_track=weight_per_day <= ON_TRACK_DAILY_KG,
        )

    async def deactivate_goal(self, goal_id: GoalId) -> None:
        """Deactivate a goal.

        Raises:
            GoalNotFoundError: If the goal doesn't exist
        """
        try:
            goal = await self.goal_repository.find_by_id(goal_id)
        except RepositoryError as e:
            raise RepositoryError(f"failed to load goal: {e}") from e
        if goal is None:
            raise GoalNotFoundError(str(goal_id))

        goal.deactivate()

        try:
            await self.goal_repository.save(goal)
        except RepositoryError as e:
            raise RepositoryError(f"failed to save goal: {e}") from e

        logger.info(
            "Goal deactivated",
            extra={"user_id": str(goal.user_id), "goal_id": str(goal_id)},
        )
