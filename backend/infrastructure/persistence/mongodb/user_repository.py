"""MongoDB implementation of user repository."""

from typing import Optional, Dict, List, Any

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.credential import Credential
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    """
    MongoDB implementation of user repository.

    Document Schema:
    {
        "_id": "user-id",
        "name": "Giada",
        "email": "giada@example.com",
        "password_hash": "pbkdf2_sha256$...",   # null until a password is set
        "is_active": true,
        "created_at": "2025-11-12T10:00:00.000000+00:00",
        "updated_at": "2025-11-12T10:00:00.000000+00:00"
    }

    Indexes:
    - email: Login lookups
    - (is_active, name): Active user listing
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return "users"

    # ============================================================
    # Document Mapping (Domain ↔ MongoDB)
    # ============================================================

    def to_document(self, entity: User) -> Dict[str, Any]:
        """Convert User entity to MongoDB document."""
        user = entity
        return {
            "_id": str(user.user_id),
            "name": user.name,
            "email": user.email,
            "password_hash": user.credential.hash if user.credential else None,
            "is_active": user.is_active,
            "created_at": self.datetime_to_iso(user.created_at),
            "updated_at": self.datetime_to_iso(user.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> User:
        """Convert MongoDB document to User entity."""
        password_hash = doc.get("password_hash")
        return User(
            user_id=UserId(doc["_id"]),
            name=doc["name"],
            email=doc.get("email", ""),
            created_at=self.iso_to_datetime(doc["created_at"]),
            updated_at=self.iso_to_datetime(doc["updated_at"]),
            credential=Credential.from_hash(password_hash) if password_hash else None,
            is_active=doc.get("is_active", True),
        )

    # ============================================================
    # Repository Interface Implementation
    # ============================================================

    async def save(self, user: User) -> None:
        """Save or update user (upsert by user_id)."""
        await self._replace_one(self.to_document(user))

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by ID."""
        doc = await self._find_one({"_id": str(user_id)})
        if doc is None:
            return None
        return self._to_entity(doc)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email, active accounts first."""
        doc = await self._find_one({"email": email}, sort=[("is_active", -1)])
        if doc is None:
            return None
        return self._to_entity(doc)

    async def find_by_name(self, name: str) -> Optional[User]:
        """Find user by display name."""
        doc = await self._find_one({"name": name})
        if doc is None:
            return None
        return self._to_entity(doc)

    async def find_active(self) -> List[User]:
        """List active users ordered by name."""
        docs = await self._find_many({"is_active": True}, sort=[("name", 1)])
        return [self._to_entity(doc) for doc in docs]

    async def exists(self, user_id: UserId) -> bool:
        """Check if user exists."""
        return await self._count({"_id": str(user_id)}) > 0

    async def email_exists(self, email: str) -> bool:
        """Check if an active user has this email."""
        return await self._count({"email": email, "is_active": True}) > 0
