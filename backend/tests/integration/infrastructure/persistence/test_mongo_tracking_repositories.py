"""Integration tests for the MongoDB tracking repositories.

Tests actual MongoDB operations against the test database:
- Upsert and lookup for every aggregate
- Chronological range queries on stored ISO strings
- Active account and active goal selection
- Expired session clean-up

Requires REPOSITORY_BACKEND=mongodb and MONGODB_URI.
"""

import os
import uuid
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from domain.goal.core.entities.goal import Goal
from domain.goal.core.value_objects.target_date import TargetDate
from domain.session.core.entities.session import Session
from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.weight.core.entities.weight import Weight
from domain.weight.core.value_objects.weight_id import WeightId
from domain.weight.core.value_objects.weight_unit import WeightUnit
from domain.weight.core.value_objects.weight_value import WeightValue
from infrastructure.persistence.factory import create_repositories

pytestmark = pytest.mark.skipif(
    os.getenv("REPOSITORY_BACKEND") != "mongodb",
    reason="MongoDB integration tests require REPOSITORY_BACKEND=mongodb",
)

CEST = timezone(timedelta(hours=2))


@pytest_asyncio.fixture
async def repos():
    """Mongo repositories; test documents are removed afterwards."""
    repositories = create_repositories("mongodb")
    yield repositories
    test_docs = {
        "$or": [
            {"_id": {"$regex": "^test_user_"}},
            {"user_id": {"$regex": "^test_user_"}},
        ]
    }
    for repo in (
        repositories.users,
        repositories.weights,
        repositories.goals,
        repositories.sessions,
    ):
        await repo.collection.delete_many(test_docs)
    await repositories.users.close()


@pytest.fixture
def user_id() -> UserId:
    return UserId(f"test_user_{uuid.uuid4().hex[:12]}")


@pytest.mark.asyncio
class TestMongoUserRepositoryIntegration:
    """User persistence."""

    async def test_save_and_find(self, repos, user_id):
        user = User.create_with_password(
            str(user_id), "Giada", f"{user_id}@example.com", "correct horse", 1000
        )
        await repos.users.save(user)

        found = await repos.users.find_by_email(f"{user_id}@example.com")

        assert found == user
        assert found.verify_password("correct horse")
        assert await repos.users.exists(user_id)
        assert await repos.users.email_exists(f"{user_id}@example.com")

    async def test_deactivated_account_releases_email(self, repos, user_id):
        user = User.create(str(user_id), "Giada", f"{user_id}@example.com")
        user.deactivate()
        await repos.users.save(user)

        assert not await repos.users.email_exists(f"{user_id}@example.com")
        assert user not in await repos.users.find_active()


@pytest.mark.asyncio
class TestMongoWeightRepositoryIntegration:
    """Weight persistence and temporal queries."""

    async def test_period_query_is_chronological_across_offsets(self, repos, user_id):
        """Measurements entered in different offsets sort by instant."""
        early_cest = datetime(2025, 6, 1, 8, 0, tzinfo=CEST)  # 06:00 UTC
        late_utc = datetime(2025, 6, 1, 7, 0, tzinfo=timezone.utc)
        for n, measured_at in enumerate((late_utc, early_cest)):
            await repos.weights.save(
                Weight.create(
                    f"weight_{user_id}_{n}",
                    user_id,
                    WeightValue.create(80 - n),
                    WeightUnit.KG,
                    measured_at,
                )
            )

        found = await repos.weights.find_by_user_id_and_period(
            user_id,
            datetime(2025, 6, 1, tzinfo=timezone.utc),
            datetime(2025, 6, 2, tzinfo=timezone.utc),
        )
        latest = await repos.weights.find_latest_by_user_id(user_id)

        assert [w.measured_at for w in found] == [early_cest, late_utc]
        assert latest.weight_id == WeightId(f"weight_{user_id}_0")
        assert await repos.weights.count_by_user_id_and_date(user_id, late_utc) == 2

    async def test_delete(self, repos, user_id):
        weight = Weight.create(
            f"weight_{user_id}",
            user_id,
            WeightValue.create(80),
            WeightUnit.KG,
            datetime.now(timezone.utc),
        )
        await repos.weights.save(weight)

        assert await repos.weights.delete(weight.weight_id)
        assert not await repos.weights.delete(weight.weight_id)


@pytest.mark.asyncio
class TestMongoGoalRepositoryIntegration:
    """Goal persistence."""

    async def test_active_goal_and_bulk_deactivation(self, repos, user_id):
        target = TargetDate.from_date(datetime.now(timezone.utc).date() + timedelta(days=60))
        goal = Goal.create(
            f"goal_{user_id}", user_id, WeightValue.create(70), WeightUnit.KG, target
        )
        await repos.goals.save(goal)

        assert await repos.goals.find_active_by_user_id(user_id) == goal
        assert await repos.goals.deactivate_by_user_id(user_id) == 1
        assert await repos.goals.find_active_by_user_id(user_id) is None
        assert [g.goal_id for g in await repos.goals.find_by_user_id(user_id)] == [goal.goal_id]


@pytest.mark.asyncio
class TestMongoSessionRepositoryIntegration:
    """Session persistence."""

    async def test_expired_sessions_removed(self, repos, user_id):
        expires = datetime.now(timezone.utc) - timedelta(minutes=5)
        stale = Session.restore(
            session_id=str(uuid.uuid4()),
            user_id=str(user_id),
            token=f"stale-{uuid.uuid4()}",
            expires_at=expires,
            created_at=expires - timedelta(days=30),
        )
        fresh = Session.create(user_id)
        await repos.sessions.save(stale)
        await repos.sessions.save(fresh)

        assert await repos.sessions.delete_expired() >= 1
        assert await repos.sessions.find_by_token(stale.token) is None
        assert (await repos.sessions.find_by_token(fresh.token)).user_id == user_id
