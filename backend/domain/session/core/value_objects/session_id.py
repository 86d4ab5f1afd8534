"""SessionId value object."""

import uuid
from dataclasses import dataclass

from ..exceptions.session_errors import InvalidSessionIdError


@dataclass(frozen=True)
class SessionId:
    """Session identifier (UUID v4 string)."""

    value: str

    @staticmethod
    def generate() -> "SessionId":
        return SessionId(str(uuid.uuid4()))

    @staticmethod
    def parse(value: str) -> "SessionId":
        """Parse a stored session ID.

        Raises:
            InvalidSessionIdError: If value is blank or not a UUID
        """
        trimmed = (value or "").strip()
        try:
            uuid.UUID(trimmed)
        except ValueError as e:
            raise InvalidSessionIdError(value) from e
        return SessionId(trimmed)

    def __str__(self) -> str:
        return self.value
