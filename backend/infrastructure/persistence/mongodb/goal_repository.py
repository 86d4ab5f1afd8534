"""MongoDB implementation of goal repository."""

from typing import Optional, Dict, List, Any
from datetime import datetime, timezone

from domain.goal.core.entities.goal import Goal
from domain.goal.core.ports.goal_repository import IGoalRepository
from domain.goal.core.value_objects.goal_id import GoalId
from domain.goal.core.value_objects.target_date import TargetDate
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoGoalRepository(MongoBaseRepository[Goal], IGoalRepository):
    """
    MongoDB implementation of goal repository.

    Document Schema:
    {
        "_id": "goal_giada_1760781234567890123",
        "user_id": "giada",
        "target_weight_kg": 65.0,
        "unit": "kg",
        "target_date": "2026-03-01",
        "description": "Summer",
        "active": true,
        "created_at": "2025-11-12T10:00:00.000000+00:00",
        "updated_at": "2025-11-12T10:00:00.000000+00:00"
    }

    Indexes:
    - (user_id, active, created_at): Active goal lookup
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return "goals"

    # ============================================================
    # Document Mapping (Domain ↔ MongoDB)
    # ============================================================

    def to_document(self, entity: Goal) -> Dict[str, Any]:
        """Convert Goal entity to MongoDB document."""
        goal = entity
        return {
            "_id": str(goal.goal_id),
            "user_id": str(goal.user_id),
            "target_weight_kg": goal.target_weight.kg,
            "unit": goal.unit.value,
            "target_date": goal.target_date.to_date().isoformat(),
            "description": goal.description,
            "active": goal.active,
            "created_at": self.datetime_to_iso(goal.created_at),
            "updated_at": self.datetime_to_iso(goal.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> Goal:
        """Convert MongoDB document to Goal entity.

        Stored deadlines may have passed since the goal was set, so the
        target date is rebuilt without the not-in-the-past rule.
        """
        year, month, day = (int(part) for part in doc["target_date"].split("-"))
        return Goal.restore(
            goal_id=doc["_id"],
            user_id=doc["user_id"],
            target_weight=doc["target_weight_kg"],
            unit=doc["unit"],
            target_date=TargetDate.restore(year, month, day),
            description=doc.get("description", ""),
            active=doc.get("active", False),
            created_at=self.iso_to_datetime(doc["created_at"]),
            updated_at=self.iso_to_datetime(doc["updated_at"]),
        )

    # ============================================================
    # Repository Interface Implementation
    # ============================================================

    async def save(self, goal: Goal) -> None:
        """Save or update goal."""
        await self._replace_one(self.to_document(goal))

    async def find_by_id(self, goal_id: GoalId) -> Optional[Goal]:
        """Find goal by ID."""
        doc = await self._find_one({"_id": str(goal_id)})
        if doc is None:
            return None
        return self._to_entity(doc)

    async def find_active_by_user_id(self, user_id: UserId) -> Optional[Goal]:
        """Most recently created active goal."""
        doc = await self._find_one(
            {"user_id": str(user_id), "active": True},
            sort=[("created_at", -1)],
        )
        if doc is None:
            return None
        return self._to_entity(doc)

    async def find_by_user_id(self, user_id: UserId) -> List[Goal]:
        """All goals of a user, newest first."""
        docs = await self._find_many({"user_id": str(user_id)}, sort=[("created_at", -1)])
        return [self._to_entity(doc) for doc in docs]

    async def deactivate_by_user_id(self, user_id: UserId) -> int:
        """Deactivate every active goal of a user."""
        now = self.datetime_to_iso(datetime.now(timezone.utc))
        return await self._update_many(
            {"user_id": str(user_id), "active": True},
            {"$set": {"active": False, "updated_at": now}},
        )

    async def delete(self, goal_id: GoalId) -> bool:
        """Delete goal, False if it did not exist."""
        return await self._delete_one({"_id": str(goal_id)}) > 0
