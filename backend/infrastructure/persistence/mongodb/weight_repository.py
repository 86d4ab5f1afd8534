"""MongoDB implementation of weight repository."""

from typing import Optional, Dict, List, Any
from datetime import datetime, timedelta

from domain.user.core.value_objects.user_id import UserId
from domain.weight.core.entities.weight import Weight
from domain.weight.core.ports.weight_repository import IWeightRepository
from domain.weight.core.value_objects.weight_id import WeightId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoWeightRepository(MongoBaseRepository[Weight], IWeightRepository):
    """
    MongoDB implementation of weight repository.

    Storage Strategy:
    - One document per measurement
    - measured_at stored as UTC ISO string, so range filters and sorts
      on it are chronological; the original offset is not kept

    Document Schema:
    {
        "_id": "weight_giada_1760781234567890123",
        "user_id": "giada",
        "value_kg": 70.5,
        "unit": "kg",
        "measured_at": "2025-11-12T07:30:00.000000+00:00",
        "notes": "after run",
        "created_at": "2025-11-12T07:31:02.123456+00:00"
    }

    Indexes:
    - (user_id, measured_at): History, latest and daily count queries
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return "weights"

    # ============================================================
    # Document Mapping (Domain ↔ MongoDB)
    # ============================================================

    def to_document(self, entity: Weight) -> Dict[str, Any]:
        """Convert Weight entity to MongoDB document."""
        weight = entity
        return {
            "_id": str(weight.weight_id),
            "user_id": str(weight.user_id),
            "value_kg": weight.value.kg,
            "unit": weight.unit.value,
            "measured_at": self.datetime_to_iso(weight.measured_at),
            "notes": weight.notes,
            "created_at": self.datetime_to_iso(weight.created_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> Weight:
        """Convert MongoDB document to Weight entity."""
        return Weight.restore(
            weight_id=doc["_id"],
            user_id=doc["user_id"],
            value=doc["value_kg"],
            unit=doc["unit"],
            measured_at=self.iso_to_datetime(doc["measured_at"]),
            notes=doc.get("notes", ""),
            created_at=self.iso_to_datetime(doc["created_at"]),
        )

    # ============================================================
    # Repository Interface Implementation
    # ============================================================

    async def save(self, weight: Weight) -> None:
        """Save or update measurement."""
        await self._replace_one(self.to_document(weight))

    async def find_by_id(self, weight_id: WeightId) -> Optional[Weight]:
        """Find measurement by ID."""
        doc = await self._find_one({"_id": str(weight_id)})
        if doc is None:
            return None
        return self._to_entity(doc)

    async def find_by_user_id(self, user_id: UserId, limit: int) -> List[Weight]:
        """Most recent measurements, newest first."""
        docs = await self._find_many(
            {"user_id": str(user_id)},
            sort=[("measured_at", -1)],
            limit=limit,
        )
        return [self._to_entity(doc) for doc in docs]

    async def find_by_user_id_and_period(
        self, user_id: UserId, from_: datetime, to: datetime
    ) -> List[Weight]:
        """Measurements within [from_, to], oldest first."""
        docs = await self._find_many(
            {
                "user_id": str(user_id),
                "measured_at": {
                    "$gte": self.datetime_to_iso(from_),
                    "$lte": self.datetime_to_iso(to),
                },
            },
            sort=[("measured_at", 1)],
        )
        return [self._to_entity(doc) for doc in docs]

    async def find_latest_by_user_id(self, user_id: UserId) -> Optional[Weight]:
        """Most recent measurement."""
        doc = await self._find_one({"user_id": str(user_id)}, sort=[("measured_at", -1)])
        if doc is None:
            return None
        return self._to_entity(doc)

    async def count_by_user_id_and_date(self, user_id: UserId, day: datetime) -> int:
        """Count measurements on the calendar day of ``day`` (in its timezone)."""
        start = day.replace(hour=0, minute=0, second=0, microsecond=0)
        end = start + timedelta(days=1)
        return await self._count(
            {
                "user_id": str(user_id),
                "measured_at": {
                    "$gte": self.datetime_to_iso(start),
                    "$lt": self.datetime_to_iso(end),
                },
            }
        )

    async def delete(self, weight_id: WeightId) -> bool:
        """Delete measurement, False if it did not exist."""
        return await self._delete_one({"_id": str(weight_id)}) > 0
