"""Goal entity - target weight with a deadline."""

from dataclasses import dataclass
from datetime import datetime, timezone

from domain.user.core.value_objects.user_id import UserId
from domain.weight.core.value_objects.weight_unit import WeightUnit
from domain.weight.core.value_objects.weight_value import WeightValue

from ..exceptions.goal_errors import ZeroTargetDateError, ZeroTargetWeightError
from ..value_objects.goal_id import GoalId
from ..value_objects.target_date import TargetDate


@dataclass
class Goal:
    """Weight goal of one user.

    A user has at most one active goal; the goal tracker enforces this by
    lookup before saving, not through the entity itself.

    Invariants:
    - target_weight is not zero
    - target_date is not the unset date

    Attributes:
        goal_id: Unique identifier
        user_id: Owning user
        target_weight: Weight to reach
        unit: Unit the target was entered in
        target_date: Deadline
        description: Free-text description
        active: Whether the goal is currently tracked
        created_at: Creation timestamp
        updated_at: Last mutation timestamp
    """

    goal_id: GoalId
    user_id: UserId
    target_weight: WeightValue
    unit: WeightUnit
    target_date: TargetDate
    description: str
    created_at: datetime
    updated_at: datetime
    active: bool = True

    def __post_init__(self) -> None:
        """Validate goal invariants.

        Raises:
            ZeroTargetWeightError: If target weight is unset
            ZeroTargetDateError: If target date is unset
        """
        if self.target_weight.is_zero():
            raise ZeroTargetWeightError()
        if self.target_date.is_zero():
            raise ZeroTargetDateError()

    @staticmethod
    def create(
        goal_id: str,
        user_id: UserId,
        target_weight: WeightValue,
        unit: WeightUnit,
        target_date: TargetDate,
        description: str = "",
    ) -> "Goal":
        """Factory method for a new, active goal.

        Returns:
            Goal: New goal with created_at == updated_at == now
        """
        now = datetime.now(timezone.utc)
        return Goal(
            goal_id=GoalId(goal_id),
            user_id=user_id,
            target_weight=target_weight,
            unit=unit,
            target_date=target_date,
            description=description,
            created_at=now,
            updated_at=now,
        )

    @staticmethod
    def restore(
        goal_id: str,
        user_id: str,
        target_weight: float,
        unit: str,
        target_date: TargetDate,
        description: str,
        active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Goal":
        """Rebuild a stored goal, keeping its state and timestamps.

        ``target_date`` should come from ``TargetDate.restore`` so that
        expired goals load with their real deadline.
        """
        return Goal(
            goal_id=GoalId(goal_id),
            user_id=UserId(user_id),
            target_weight=WeightValue.create(target_weight),
            unit=WeightUnit.parse(unit),
            target_date=target_date,
            description=description or "",
            created_at=created_at,
            updated_at=updated_at,
            active=active,
        )

    @property
    def is_active(self) -> bool:
        return self.active

    def activate(self) -> None:
        self.active = True
        self._touch()

    def deactivate(self) -> None:
        self.active = False
        self._touch()

    def update_description(self, description: str) -> None:
        self.description = description
        self._touch()

    def is_expired(self) -> bool:
        """Deadline has passed (checked against the current date)."""
        return self.target_date.is_past()

    def days_remaining(self) -> int:
        return self.target_date.days_until()

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def __eq__(self, other: object) -> bool:
        """Equality based on goal_id (entity identity)."""
        if not isinstance(other, Goal):
            return False
        return self.goal_id == other.goal_id

    def __hash__(self) -> int:
        return hash(self.goal_id)
