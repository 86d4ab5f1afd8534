"""In-memory session repository implementation."""

from copy import deepcopy
from datetime import datetime, timezone
from typing import Dict, Optional

from domain.session.core.entities.session import Session
from domain.session.core.ports.session_repository import ISessionRepository
from domain.user.core.value_objects.user_id import UserId


class InMemorySessionRepository(ISessionRepository):
    """In-memory implementation of session repository, keyed by token."""

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._sessions: Dict[str, Session] = {}

    async def save(self, session: Session) -> None:
        self._sessions[session.token] = deepcopy(session)

    async def find_by_token(self, token: str) -> Optional[Session]:
        session = self._sessions.get(token)
        return deepcopy(session) if session else None

    async def delete_by_token(self, token: str) -> None:
        self._sessions.pop(token, None)

    async def delete_by_user_id(self, user_id: UserId) -> int:
        tokens = [t for t, s in self._sessions.items() if s.user_id == user_id]
        for token in tokens:
            del self._sessions[token]
        return len(tokens)

    async def delete_expired(self) -> int:
        now = datetime.now(timezone.utc)
        tokens = [t for t, s in self._sessions.items() if s.expires_at < now]
        for token in tokens:
            del self._sessions[token]
        return len(tokens)

    def clear(self) -> None:
        """Clear all sessions (for testing)."""
        self._sessions.clear()

    def count(self) -> int:
        """Get total number of sessions stored."""
        return len(self._sessions)
