"""User entity - aggregate root."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from domain.user.core.exceptions.user_errors import EmptyUserNameError
from domain.user.core.value_objects.credential import (
    Credential,
    DEFAULT_HASH_ITERATIONS,
)
from domain.user.core.value_objects.user_id import UserId


@dataclass
class User:
    """User aggregate root.

    A user may exist without a credential (invited / pre-migration account);
    ``has_password()`` tells the two states apart.

    Invariants:
    - name is trimmed and non-empty
    - every mutation bumps updated_at

    Examples:
        >>> user = User.create("giada", "Giada", "giada@example.com")
        >>> user.is_active
        True
        >>> user.has_password()
        False
    """

    user_id: UserId
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
    credential: Optional[Credential] = None
    is_active: bool = True

    def __post_init__(self) -> None:
        """Validate invariants."""
        trimmed = (self.name or "").strip()
        if not trimmed:
            raise EmptyUserNameError()
        self.name = trimmed

    @staticmethod
    def create(user_id: str, name: str, email: str) -> "User":
        """Factory method to create a new user without a password.

        Args:
            user_id: Identifier (trimmed, max 50 chars)
            name: Display name (trimmed, non-empty)
            email: Email address, stored as given

        Returns:
            New active User

        Raises:
            InvalidIdentifierError: If user_id is invalid
            EmptyUserNameError: If name is blank
        """
        now = datetime.now(timezone.utc)
        return User(
            user_id=UserId(user_id),
            name=name,
            email=email,
            created_at=now,
            updated_at=now,
        )

    @staticmethod
    def create_with_password(
        user_id: str,
        name: str,
        email: str,
        password: str,
        hash_iterations: int = DEFAULT_HASH_ITERATIONS,
    ) -> "User":
        """Factory method to create a new user with a hashed password.

        Raises:
            PasswordTooShortError: If password is too short
        """
        user = User.create(user_id, name, email)
        user.set_password(password, hash_iterations)
        return user

    def has_password(self) -> bool:
        """True when a credential is set."""
        return self.credential is not None and not self.credential.is_empty()

    def set_password(
        self, plaintext: str, hash_iterations: int = DEFAULT_HASH_ITERATIONS
    ) -> None:
        """Hash and store a new password."""
        self.credential = Credential.create(plaintext, hash_iterations)
        self._touch()

    def verify_password(self, plaintext: str) -> bool:
        """Check a password. Always False for users without a credential."""
        if self.credential is None:
            return False
        return self.credential.verify(plaintext)

    def deactivate(self) -> None:
        """Deactivate user account."""
        self.is_active = False
        self._touch()

    def activate(self) -> None:
        """Reactivate user account."""
        self.is_active = True
        self._touch()

    def update_email(self, email: str) -> None:
        self.email = email
        self._touch()

    def update_name(self, name: str) -> None:
        """Rename the user.

        Raises:
            EmptyUserNameError: If name is blank; the previous name is kept
        """
        trimmed = name.strip()
        if not trimmed:
            raise EmptyUserNameError()
        self.name = trimmed
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def __eq__(self, other: object) -> bool:
        """Equality based on user_id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        """Hash based on user_id (aggregate identity)."""
        return hash(self.user_id)
