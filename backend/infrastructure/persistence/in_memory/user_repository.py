"""In-memory user repository implementation."""

from copy import deepcopy
from typing import Dict, List, Optional

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository for testing.

    Stores users keyed by user_id. Useful for unit tests and local runs
    without MongoDB.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> await repo.save(User.create("giada", "Giada", "giada@example.com"))
        >>> found = await repo.find_by_email("giada@example.com")
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}

    async def save(self, user: User) -> None:
        """Save or update user in memory (stores a deep copy)."""
        self._users[str(user.user_id)] = deepcopy(user)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        user = self._users.get(str(user_id))
        return deepcopy(user) if user else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email, preferring an active account."""
        matches = [u for u in self._users.values() if u.email == email]
        if not matches:
            return None
        matches.sort(key=lambda u: not u.is_active)
        return deepcopy(matches[0])

    async def find_by_name(self, name: str) -> Optional[User]:
        for user in self._users.values():
            if user.name == name:
                return deepcopy(user)
        return None

    async def find_active(self) -> List[User]:
        active = [u for u in self._users.values() if u.is_active]
        active.sort(key=lambda u: u.name)
        return [deepcopy(u) for u in active]

    async def exists(self, user_id: UserId) -> bool:
        return str(user_id) in self._users

    async def email_exists(self, email: str) -> bool:
        return any(u.email == email and u.is_active for u in self._users.values())

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._users.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)
