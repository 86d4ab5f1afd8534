"""MongoDB implementation of session repository."""

from typing import Optional, Dict, Any
from datetime import datetime, timezone

from domain.session.core.entities.session import Session
from domain.session.core.ports.session_repository import ISessionRepository
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoSessionRepository(MongoBaseRepository[Session], ISessionRepository):
    """
    MongoDB implementation of session repository.

    Document Schema:
    {
        "_id": "uuid-string",
        "user_id": "giada",
        "token": "url-safe-base64",
        "expires_at": "2025-12-12T10:00:00.000000+00:00",
        "created_at": "2025-11-12T10:00:00.000000+00:00"
    }

    Indexes:
    - token: Unique, session validation
    - expires_at: Expired session clean-up
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return "sessions"

    # ============================================================
    # Document Mapping (Domain ↔ MongoDB)
    # ============================================================

    def to_document(self, entity: Session) -> Dict[str, Any]:
        """Convert Session entity to MongoDB document."""
        session = entity
        return {
            "_id": str(session.session_id),
            "user_id": str(session.user_id),
            "token": session.token,
            "expires_at": self.datetime_to_iso(session.expires_at),
            "created_at": self.datetime_to_iso(session.created_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> Session:
        """Convert MongoDB document to Session entity."""
        return Session.restore(
            session_id=doc["_id"],
            user_id=doc["user_id"],
            token=doc["token"],
            expires_at=self.iso_to_datetime(doc["expires_at"]),
            created_at=self.iso_to_datetime(doc["created_at"]),
        )

    # ============================================================
    # Repository Interface Implementation
    # ============================================================

    async def save(self, session: Session) -> None:
        """Save or update session."""
        await self._replace_one(self.to_document(session))

    async def find_by_token(self, token: str) -> Optional[Session]:
        """Find session by token."""
        doc = await self._find_one({"token": token})
        if doc is None:
            return None
        return self._to_entity(doc)

    async def delete_by_token(self, token: str) -> None:
        """Delete session by token (no-op if unknown)."""
        await self._delete_one({"token": token})

    async def delete_by_user_id(self, user_id: UserId) -> int:
        """Delete every session of a user."""
        return await self._delete_many({"user_id": str(user_id)})

    async def delete_expired(self) -> int:
        """Delete sessions that expired before now."""
        now = self.datetime_to_iso(datetime.now(timezone.utc))
        return await self._delete_many({"expires_at": {"$lt": now}})
