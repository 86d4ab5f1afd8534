"""In-memory goal repository implementation."""

from copy import deepcopy
from typing import Dict, List, Optional

from domain.goal.core.entities.goal import Goal
from domain.goal.core.ports.goal_repository import IGoalRepository
from domain.goal.core.value_objects.goal_id import GoalId
from domain.user.core.value_objects.user_id import UserId


class InMemoryGoalRepository(IGoalRepository):
    """
    In-memory implementation of IGoalRepository port.

    Thread safety: NOT thread-safe
    Persistence: Data lost on process restart (in-memory only)
    """

    def __init__(self) -> None:
        """Initialize repository with empty storage."""
        self._storage: Dict[str, Goal] = {}

    async def save(self, goal: Goal) -> None:
        """Save or update goal (stores a deep copy)."""
        self._storage[str(goal.goal_id)] = deepcopy(goal)

    async def find_by_id(self, goal_id: GoalId) -> Optional[Goal]:
        goal = self._storage.get(str(goal_id))
        return deepcopy(goal) if goal else None

    async def find_active_by_user_id(self, user_id: UserId) -> Optional[Goal]:
        active = [g for g in self._storage.values() if g.user_id == user_id and g.active]
        if not active:
            return None
        return deepcopy(max(active, key=lambda g: g.created_at))

    async def find_by_user_id(self, user_id: UserId) -> List[Goal]:
        """All goals of a user, newest first."""
        goals = [g for g in self._storage.values() if g.user_id == user_id]
        goals.sort(key=lambda g: g.created_at, reverse=True)
        return [deepcopy(g) for g in goals]

    async def deactivate_by_user_id(self, user_id: UserId) -> int:
        deactivated = 0
        for goal in self._storage.values():
            if goal.user_id == user_id and goal.active:
                goal.deactivate()
                deactivated += 1
        return deactivated

    async def delete(self, goal_id: GoalId) -> bool:
        return self._storage.pop(str(goal_id), None) is not None

    def clear(self) -> None:
        """Clear all goals (for testing)."""
        self._storage.clear()

    def count(self) -> int:
        """Get total number of goals stored."""
        return len(self._storage)
