"""Unit tests for Goal entity."""

import pytest
from datetime import datetime, timezone
from freezegun import freeze_time

from domain.goal.core.entities import Goal
from domain.goal.core.exceptions import ZeroTargetDateError, ZeroTargetWeightError
from domain.goal.core.value_objects import GoalId, TargetDate
from domain.shared.errors import InvalidIdentifierError
from domain.user.core.value_objects.user_id import UserId
from domain.weight.core.value_objects import WeightUnit, WeightValue


def make_goal(goal_id: str = "goal_1") -> Goal:
    return Goal.create(
        goal_id=goal_id,
        user_id=UserId("giada"),
        target_weight=WeightValue.create(65.0),
        unit=WeightUnit.KG,
        target_date=TargetDate.create(2025, 9, 1),
        description="Summer",
    )


@freeze_time("2025-06-15 12:00:00")
class TestGoalCreate:
    """Test Goal.create() factory."""

    def test_create_active_goal(self):
        """Test that new goals are active with matching timestamps."""
        goal = make_goal()

        assert goal.goal_id == GoalId("goal_1")
        assert goal.user_id == UserId("giada")
        assert goal.target_weight.kg == 65.0
        assert goal.description == "Summer"
        assert goal.is_active is True
        assert goal.created_at == datetime(2025, 6, 15, 12, tzinfo=timezone.utc)
        assert goal.updated_at == goal.created_at

    def test_zero_target_weight_rejected(self):
        """Test that a goal needs a target weight."""
        with pytest.raises(ZeroTargetWeightError):
            Goal.create(
                goal_id="goal_1",
                user_id=UserId("giada"),
                target_weight=WeightValue.zero(),
                unit=WeightUnit.KG,
                target_date=TargetDate.create(2025, 9, 1),
            )

    def test_zero_target_date_rejected(self):
        """Test that a goal needs a target date."""
        with pytest.raises(ZeroTargetDateError):
            Goal.create(
                goal_id="goal_1",
                user_id=UserId("giada"),
                target_weight=WeightValue.create(65),
                unit=WeightUnit.KG,
                target_date=TargetDate(),
            )

    def test_blank_id_rejected(self):
        """Test that the identifier must not be blank."""
        with pytest.raises(InvalidIdentifierError):
            make_goal(goal_id="")


class TestGoalLifecycle:
    """Test activation and mutation."""

    @freeze_time("2025-06-15 12:00:00")
    def test_deactivate_and_activate_bump_updated_at(self):
        """Test toggling the active flag."""
        goal = make_goal()

        with freeze_time("2025-06-16 12:00:00"):
            goal.deactivate()
        assert goal.is_active is False
        assert goal.updated_at == datetime(2025, 6, 16, 12, tzinfo=timezone.utc)

        with freeze_time("2025-06-17 12:00:00"):
            goal.activate()
        assert goal.is_active is True
        assert goal.updated_at == datetime(2025, 6, 17, 12, tzinfo=timezone.utc)
        assert goal.created_at == datetime(2025, 6, 15, 12, tzinfo=timezone.utc)

    @freeze_time("2025-06-15 12:00:00")
    def test_update_description(self):
        """Test changing the description."""
        goal = make_goal()

        with freeze_time("2025-06-16 12:00:00"):
            goal.update_description("Wedding")

        assert goal.description == "Wedding"
        assert goal.updated_at > goal.created_at

    def test_expiry_follows_clock(self):
        """Test is_expired and days_remaining."""
        with freeze_time("2025-06-15 12:00:00"):
            goal = make_goal()
            assert goal.is_expired() is False
            assert goal.days_remaining() == 78

        with freeze_time("2025-09-02 08:00:00"):
            assert goal.is_expired() is True
            assert goal.days_remaining() == -1


class TestGoalRestore:
    """Test Goal.restore() reconstruction."""

    @freeze_time("2025-06-15 12:00:00")
    def test_restore_keeps_state_and_timestamps(self):
        """Test that stored state survives reconstruction."""
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        updated = datetime(2024, 2, 1, tzinfo=timezone.utc)

        goal = Goal.restore(
            goal_id="goal_1",
            user_id="giada",
            target_weight=65.0,
            unit="kg",
            target_date=TargetDate.restore(2024, 3, 1),
            description="Old goal",
            active=False,
            created_at=created,
            updated_at=updated,
        )

        assert goal.is_active is False
        assert goal.created_at == created
        assert goal.updated_at == updated
        assert goal.is_expired() is True

    def test_equality_by_id(self):
        """Test that equality uses goal_id only."""
        with freeze_time("2025-06-15 12:00:00"):
            first = make_goal()
            second = make_goal()
            third = make_goal("goal_2")

        assert first == second
        assert first != third
