"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Single-item lookups return None when nothing matches; callers must turn
    that into a not-found error. Storage failures raise RepositoryError.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     async def save(self, user: User) -> None:
        ...         # Save to MongoDB
        ...         pass
    """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save user (create or update, upsert by user_id).

        Args:
            user: User entity to persist

        Raises:
            RepositoryError: If save operation fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by ID.

        Args:
            user_id: User identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by normalized email.

        When an inactive and an active account share the email, the active
        one is returned.

        Args:
            email: Lower-cased, trimmed email

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[User]:
        """Find user by exact display name."""
        pass

    @abstractmethod
    async def find_active(self) -> List[User]:
        """List active users ordered by name."""
        pass

    @abstractmethod
    async def exists(self, user_id: UserId) -> bool:
        """Check if a user with this ID exists.

        Note:
            More efficient than find_by_id when only checking existence.
        """
        pass

    @abstractmethod
    async def email_exists(self, email: str) -> bool:
        """Check if an active user is registered with this email."""
        pass
