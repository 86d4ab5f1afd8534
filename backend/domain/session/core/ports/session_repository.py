"""Session repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.user.core.value_objects.user_id import UserId

from ..entities.session import Session


class ISessionRepository(ABC):
    """Repository interface for sessions."""

    @abstractmethod
    async def save(self, session: Session) -> None:
        """Save session (create or update)."""
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[Session]:
        """Find session by token.

        Returns:
            Session if found (expired or not), None otherwise
        """
        pass

    @abstractmethod
    async def delete_by_token(self, token: str) -> None:
        """Delete session by token. Unknown tokens are ignored."""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UserId) -> int:
        """Delete every session of a user.

        Returns:
            Number of sessions deleted
        """
        pass

    @abstractmethod
    async def delete_expired(self) -> int:
        """Delete sessions whose expires_at is before now.

        Returns:
            Number of sessions deleted
        """
        pass
