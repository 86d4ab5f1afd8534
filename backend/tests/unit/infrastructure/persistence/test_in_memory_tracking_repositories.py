"""Unit tests for the in-memory repositories.

Tests focus on:
- Save and retrieve (stored copies are isolated from callers)
- Query ordering and limits
- Day and period boundaries
- Active-account and active-goal selection
- Session expiry clean-up

For the MongoDB counterparts, see tests/integration/infrastructure/persistence/
"""

import uuid

import pytest
from datetime import datetime, timedelta, timezone

from domain.goal.core.entities.goal import Goal
from domain.goal.core.value_objects.goal_id import GoalId
from domain.goal.core.value_objects.target_date import TargetDate
from domain.session.core.entities.session import Session
from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.weight.core.entities.weight import Weight
from domain.weight.core.value_objects.weight_id import WeightId
from domain.weight.core.value_objects.weight_unit import WeightUnit
from domain.weight.core.value_objects.weight_value import WeightValue
from infrastructure.persistence.in_memory import (
    InMemoryGoalRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
    InMemoryWeightRepository,
)

GIADA = UserId("giada")
MARCO = UserId("marco")
BASE = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


def make_weight(weight_id: str, user_id: UserId, kg: float, measured_at: datetime) -> Weight:
    return Weight.create(
        weight_id, user_id, WeightValue.create(kg), WeightUnit.KG, measured_at
    )


def make_goal(goal_id: str, user_id: UserId, created_at: datetime, active: bool = True) -> Goal:
    return Goal.restore(
        goal_id=goal_id,
        user_id=str(user_id),
        target_weight=70.0,
        unit="kg",
        target_date=TargetDate.restore(2030, 1, 1),
        description="",
        active=active,
        created_at=created_at,
        updated_at=created_at,
    )


class TestInMemoryUserRepository:
    """Test InMemoryUserRepository."""

    @pytest.fixture
    def repository(self) -> InMemoryUserRepository:
        return InMemoryUserRepository()

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, repository):
        """Test round trip by id."""
        user = User.create("giada", "Giada", "giada@example.com")
        await repository.save(user)

        found = await repository.find_by_id(GIADA)

        assert found == user
        assert found is not user
        assert await repository.exists(GIADA)
        assert not await repository.exists(MARCO)

    @pytest.mark.asyncio
    async def test_returned_copy_is_isolated(self, repository):
        """Mutating a loaded user does not touch the stored one."""
        await repository.save(User.create("giada", "Giada", "giada@example.com"))

        found = await repository.find_by_id(GIADA)
        found.deactivate()

        assert (await repository.find_by_id(GIADA)).is_active

    @pytest.mark.asyncio
    async def test_find_by_email_prefers_active(self, repository):
        """Test that the active account wins over a deactivated one."""
        old = User.create("old", "Old", "giada@example.com")
        old.deactivate()
        await repository.save(old)
        await repository.save(User.create("giada", "Giada", "giada@example.com"))

        found = await repository.find_by_email("giada@example.com")

        assert found.user_id == GIADA
        assert await repository.find_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_email_exists_counts_active_users_only(self, repository):
        """Test that deactivated accounts release their email."""
        old = User.create("old", "Old", "giada@example.com")
        old.deactivate()
        await repository.save(old)

        assert not await repository.email_exists("giada@example.com")

        await repository.save(User.create("giada", "Giada", "giada@example.com"))
        assert await repository.email_exists("giada@example.com")

    @pytest.mark.asyncio
    async def test_find_active_sorted_by_name(self, repository):
        """Test active listing."""
        await repository.save(User.create("marco", "Marco", "marco@example.com"))
        await repository.save(User.create("giada", "Giada", "giada@example.com"))
        inactive = User.create("anna", "Anna", "anna@example.com")
        inactive.deactivate()
        await repository.save(inactive)

        active = await repository.find_active()

        assert [u.name for u in active] == ["Giada", "Marco"]
        assert (await repository.find_by_name("Anna")).user_id == UserId("anna")
        assert repository.count() == 3


class TestInMemoryWeightRepository:
    """Test InMemoryWeightRepository."""

    @pytest.fixture
    def repository(self) -> InMemoryWeightRepository:
        return InMemoryWeightRepository()

    @pytest.mark.asyncio
    async def test_find_by_user_id_newest_first_with_limit(self, repository):
        """Test recent listing."""
        for i in range(5):
            await repository.save(make_weight(f"w{i}", GIADA, 80 - i, BASE + timedelta(days=i)))
        await repository.save(make_weight("other", MARCO, 90, BASE))

        recent = await repository.find_by_user_id(GIADA, 3)

        assert [str(w.weight_id) for w in recent] == ["w4", "w3", "w2"]

    @pytest.mark.asyncio
    async def test_period_is_inclusive_and_oldest_first(self, repository):
        """Test that both bounds are included."""
        await repository.save(make_weight("before", GIADA, 80, BASE - timedelta(seconds=1)))
        await repository.save(make_weight("end", GIADA, 79, BASE + timedelta(days=2)))
        await repository.save(make_weight("start", GIADA, 81, BASE))

        found = await repository.find_by_user_id_and_period(GIADA, BASE, BASE + timedelta(days=2))

        assert [str(w.weight_id) for w in found] == ["start", "end"]

    @pytest.mark.asyncio
    async def test_latest(self, repository):
        """Test latest by measurement time, not insertion order."""
        await repository.save(make_weight("new", GIADA, 79, BASE))
        await repository.save(make_weight("old", GIADA, 80, BASE - timedelta(days=3)))

        latest = await repository.find_latest_by_user_id(GIADA)

        assert str(latest.weight_id) == "new"
        assert await repository.find_latest_by_user_id(MARCO) is None

    @pytest.mark.asyncio
    async def test_count_by_day_is_half_open(self, repository):
        """Test that midnight belongs to the next day."""
        midnight = datetime(2025, 3, 11, tzinfo=timezone.utc)
        await repository.save(make_weight("late", GIADA, 80, midnight - timedelta(microseconds=1)))
        await repository.save(make_weight("midnight", GIADA, 80, midnight))
        await repository.save(make_weight("noon", GIADA, 80, midnight + timedelta(hours=12)))

        assert await repository.count_by_user_id_and_date(GIADA, midnight - timedelta(hours=3)) == 1
        assert await repository.count_by_user_id_and_date(GIADA, midnight) == 2
        assert await repository.count_by_user_id_and_date(MARCO, midnight) == 0

    @pytest.mark.asyncio
    async def test_delete(self, repository):
        """Test delete reports whether something was removed."""
        await repository.save(make_weight("w1", GIADA, 80, BASE))

        assert await repository.delete(WeightId("w1"))
        assert not await repository.delete(WeightId("w1"))
        assert await repository.find_by_id(WeightId("w1")) is None


class TestInMemoryGoalRepository:
    """Test InMemoryGoalRepository."""

    @pytest.fixture
    def repository(self) -> InMemoryGoalRepository:
        return InMemoryGoalRepository()

    @pytest.mark.asyncio
    async def test_active_goal_is_most_recent(self, repository):
        """Test active lookup ignores inactive goals."""
        await repository.save(make_goal("g1", GIADA, BASE))
        await repository.save(make_goal("g2", GIADA, BASE + timedelta(days=1)))
        await repository.save(make_goal("g3", GIADA, BASE + timedelta(days=2), active=False))

        active = await repository.find_active_by_user_id(GIADA)

        assert active.goal_id == GoalId("g2")
        assert await repository.find_active_by_user_id(MARCO) is None

    @pytest.mark.asyncio
    async def test_find_by_user_id_newest_first(self, repository):
        """Test full goal history."""
        await repository.save(make_goal("g1", GIADA, BASE))
        await repository.save(make_goal("g2", GIADA, BASE + timedelta(days=1), active=False))
        await repository.save(make_goal("m1", MARCO, BASE))

        goals = await repository.find_by_user_id(GIADA)

        assert [str(g.goal_id) for g in goals] == ["g2", "g1"]

    @pytest.mark.asyncio
    async def test_deactivate_by_user_id(self, repository):
        """Test bulk deactivation only touches the user's active goals."""
        await repository.save(make_goal("g1", GIADA, BASE))
        await repository.save(make_goal("g2", GIADA, BASE, active=False))
        await repository.save(make_goal("m1", MARCO, BASE))

        assert await repository.deactivate_by_user_id(GIADA) == 1
        assert await repository.find_active_by_user_id(GIADA) is None
        assert await repository.find_active_by_user_id(MARCO) is not None

    @pytest.mark.asyncio
    async def test_delete(self, repository):
        """Test delete."""
        await repository.save(make_goal("g1", GIADA, BASE))

        assert await repository.delete(GoalId("g1"))
        assert not await repository.delete(GoalId("g1"))
        assert repository.count() == 0


class TestInMemorySessionRepository:
    """Test InMemorySessionRepository."""

    @pytest.fixture
    def repository(self) -> InMemorySessionRepository:
        return InMemorySessionRepository()

    @staticmethod
    def expired(user_id: UserId) -> Session:
        expires = datetime.now(timezone.utc) - timedelta(minutes=1)
        return Session.restore(
            session_id=str(uuid.uuid4()),
            user_id=str(user_id),
            token=f"token-{uuid.uuid4()}",
            expires_at=expires,
            created_at=expires - timedelta(days=30),
        )

    @pytest.mark.asyncio
    async def test_find_by_token(self, repository):
        """Test lookup by token."""
        session = Session.create(GIADA)
        await repository.save(session)

        found = await repository.find_by_token(session.token)

        assert found.session_id == session.session_id
        assert await repository.find_by_token("missing") is None

    @pytest.mark.asyncio
    async def test_delete_by_token_ignores_unknown(self, repository):
        """Test that deleting an unknown token is a no-op."""
        session = Session.create(GIADA)
        await repository.save(session)

        await repository.delete_by_token("missing")
        await repository.delete_by_token(session.token)

        assert repository.count() == 0

    @pytest.mark.asyncio
    async def test_delete_by_user_id(self, repository):
        """Test removing every session of a user."""
        await repository.save(Session.create(GIADA))
        await repository.save(Session.create(GIADA))
        await repository.save(Session.create(MARCO))

        assert await repository.delete_by_user_id(GIADA) == 2
        assert repository.count() == 1

    @pytest.mark.asyncio
    async def test_delete_expired(self, repository):
        """Test that only expired sessions are removed."""
        await repository.save(self.expired(GIADA))
        await repository.save(self.expired(MARCO))
        await repository.save(Session.create(GIADA))

        assert await repository.delete_expired() == 2
        assert repository.count() == 1
