"""Session entity."""

import base64
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from domain.user.core.value_objects.user_id import UserId

from ..value_objects.session_id import SessionId

TOKEN_BYTES = 32
SESSION_LIFETIME = timedelta(days=30)


def _generate_token() -> str:
    return base64.urlsafe_b64encode(secrets.token_bytes(TOKEN_BYTES)).decode("ascii")


@dataclass
class Session:
    """Authenticated session of a user.

    The token is 32 random bytes, URL-safe base64 encoded. Expiry is
    checked against the wall clock on every call.

    Examples:
        >>> session = Session.create(UserId("giada"))
        >>> session.is_valid()
        True
    """

    session_id: SessionId
    user_id: UserId
    token: str
    expires_at: datetime
    created_at: datetime

    @staticmethod
    def create(user_id: UserId) -> "Session":
        """Open a new session valid for 30 days."""
        now = datetime.now(timezone.utc)
        return Session(
            session_id=SessionId.generate(),
            user_id=user_id,
            token=_generate_token(),
            expires_at=now + SESSION_LIFETIME,
            created_at=now,
        )

    @staticmethod
    def restore(
        session_id: str,
        user_id: str,
        token: str,
        expires_at: datetime,
        created_at: datetime,
    ) -> "Session":
        """Rebuild a stored session."""
        return Session(
            session_id=SessionId.parse(session_id),
            user_id=UserId(user_id),
            token=token,
            expires_at=expires_at,
            created_at=created_at,
        )

    def is_expired(self) -> bool:
        return datetime.now(timezone.utc) > self.expires_at

    def is_valid(self) -> bool:
        return not self.is_expired()
