"""User domain exceptions."""

from typing import TYPE_CHECKING

from domain.shared.errors import (
    NotFoundError,
    PolicyError,
    TrackingError,
    ValidationError,
)

if TYPE_CHECKING:
    from domain.user.core.entities.user import User


class UserDomainError(TrackingError):
    """Base exception for User domain errors."""

    pass


class UserNotFoundError(UserDomainError, NotFoundError):
    """User was not found in the repository."""

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: User ID or email that was not found
        """
        self.identifier = identifier
        super().__init__(f"User not found: {identifier}")


class AuthUserNotFoundError(UserNotFoundError):
    """User behind an authentication flow no longer exists."""

    pass


class UserNotActiveError(UserDomainError, PolicyError):
    """User account is inactive/deactivated."""

    def __init__(self, user_id: str):
        """Initialize with user ID.

        Args:
            user_id: ID of inactive user
        """
        self.user_id = user_id
        super().__init__(f"User account is inactive: {user_id}")


class EmptyUserNameError(UserDomainError, ValidationError):
    """User name is blank."""

    def __init__(self) -> None:
        super().__init__("User name cannot be empty")


class PasswordTooShortError(UserDomainError, ValidationError):
    """Password does not reach the minimum length."""

    def __init__(self, min_length: int):
        self.min_length = min_length
        super().__init__(f"Password must be at least {min_length} characters")


class InvalidEmailError(UserDomainError, ValidationError):
    """Email does not pass the format check."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Invalid email format: {email!r}")


class EmailAlreadyExistsError(UserDomainError, PolicyError):
    """An active user is already registered with this email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class InvalidCredentialsError(UserDomainError, PolicyError):
    """Unknown email or wrong password.

    Both cases share this error so callers cannot tell which emails exist.
    """

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class NoPasswordError(UserDomainError, PolicyError):
    """User exists but has not set a password yet.

    Carries the user so the caller can route into the set-password flow.
    """

    def __init__(self, user: "User"):
        self.user = user
        super().__init__(f"User has no password set: {user.user_id}")
