"""IGoalRepository port - repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.user.core.value_objects.user_id import UserId

from ..entities.goal import Goal
from ..value_objects.goal_id import GoalId


class IGoalRepository(ABC):
    """Port for goal persistence.

    Defines interface that infrastructure adapters must implement.
    One-active-goal-per-user is a service policy, not a storage constraint.
    """

    @abstractmethod
    async def save(self, goal: Goal) -> None:
        """Save goal (create or update)."""
        pass

    @abstractmethod
    async def find_by_id(self, goal_id: GoalId) -> Optional[Goal]:
        """Find goal by ID.

        Returns:
            Optional[Goal]: Goal if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_user_id(self, user_id: UserId) -> Optional[Goal]:
        """Most recently created active goal of a user, None if none."""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> List[Goal]:
        """All goals of a user, newest first."""
        pass

    @abstractmethod
    async def deactivate_by_user_id(self, user_id: UserId) -> int:
        """Deactivate every active goal of a user.

        Returns:
            int: Number of goals deactivated
        """
        pass

    @abstractmethod
    async def delete(self, goal_id: GoalId) -> bool:
        """Delete goal.

        Returns:
            bool: True if deleted, False if it did not exist
        """
        pass
