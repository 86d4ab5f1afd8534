"""In-memory weight repository implementation."""

from copy import deepcopy
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from domain.user.core.value_objects.user_id import UserId
from domain.weight.core.entities.weight import Weight
from domain.weight.core.ports.weight_repository import IWeightRepository
from domain.weight.core.value_objects.weight_id import WeightId


class InMemoryWeightRepository(IWeightRepository):
    """
    In-memory implementation of IWeightRepository port.

    Thread safety: NOT thread-safe (use locks if needed in production)
    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> repository = InMemoryWeightRepository()
        >>> await repository.save(weight)
        >>> latest = await repository.find_latest_by_user_id(weight.user_id)
    """

    def __init__(self) -> None:
        """Initialize repository with empty storage."""
        self._storage: Dict[str, Weight] = {}

    async def save(self, weight: Weight) -> None:
        """Save or update a measurement (stores a deep copy)."""
        self._storage[str(weight.weight_id)] = deepcopy(weight)

    async def find_by_id(self, weight_id: WeightId) -> Optional[Weight]:
        weight = self._storage.get(str(weight_id))
        return deepcopy(weight) if weight else None

    async def find_by_user_id(self, user_id: UserId, limit: int) -> List[Weight]:
        """Most recent measurements, newest first."""
        user_weights = self._for_user(user_id)
        user_weights.sort(key=lambda w: w.measured_at, reverse=True)
        return [deepcopy(w) for w in user_weights[:limit]]

    async def find_by_user_id_and_period(
        self, user_id: UserId, from_: datetime, to: datetime
    ) -> List[Weight]:
        """Measurements within [from_, to], oldest first."""
        filtered = [w for w in self._for_user(user_id) if from_ <= w.measured_at <= to]
        filtered.sort(key=lambda w: w.measured_at)
        return [deepcopy(w) for w in filtered]

    async def find_latest_by_user_id(self, user_id: UserId) -> Optional[Weight]:
        user_weights = self._for_user(user_id)
        if not user_weights:
            return None
        return deepcopy(max(user_weights, key=lambda w: w.measured_at))

    async def count_by_user_id_and_date(self, user_id: UserId, day: datetime) -> int:
        """Count measurements on the calendar day of ``day`` (in its timezone)."""
        start = day.replace(hour=0, minute=0, second=0, microsecond=0)
        end = start + timedelta(days=1)
        return sum(1 for w in self._for_user(user_id) if start <= w.measured_at < end)

    async def delete(self, weight_id: WeightId) -> bool:
        return self._storage.pop(str(weight_id), None) is not None

    def _for_user(self, user_id: UserId) -> List[Weight]:
        return [w for w in self._storage.values() if w.user_id == user_id]

    def clear(self) -> None:
        """Clear all measurements (for testing)."""
        self._storage.clear()

    def count(self) -> int:
        """Get total number of measurements stored."""
        return len(self._storage)
