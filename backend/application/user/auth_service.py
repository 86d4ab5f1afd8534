"""AuthService - registration, login and sessions."""

import logging
import uuid
from dataclasses import dataclass
from typing import Tuple

from domain.session.core.entities.session import Session
from domain.session.core.exceptions.session_errors import SessionExpiredError
from domain.session.core.ports.session_repository import ISessionRepository
from domain.shared.errors import RepositoryError
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import (
    AuthUserNotFoundError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidEmailError,
    NoPasswordError,
)
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.credential import DEFAULT_HASH_ITERATIONS

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _is_valid_email(email: str) -> bool:
    """Loose shape check: ``x@y.z`` with at least one char in each part."""
    at = email.find("@")
    if at < 1:
        return False
    dot = email.rfind(".")
    return dot >= at + 2 and dot < len(email) - 1


@dataclass
class AuthService:
    """Password authentication and bearer-token sessions.

    Attributes:
        user_repository: User persistence
        session_repository: Session persistence
        hash_iterations: PBKDF2 iteration count for new credentials
    """

    user_repository: IUserRepository
    session_repository: ISessionRepository
    hash_iterations: int = DEFAULT_HASH_ITERATIONS

    async def register(self, name: str, email: str, password: str) -> Tuple[User, Session]:
        """Create an account with a password and open a session.

        Args:
            name: Display name
            email: Email address (trimmed and lower-cased)
            password: Plaintext password, at least 8 characters

        Returns:
            Tuple of the new user and its first session

        Raises:
            InvalidEmailError: If email is malformed
            EmailAlreadyExistsError: If an active user has this email
            PasswordTooShortError: If password is too short
            EmptyUserNameError: If name is blank
        """
        email = _normalize_email(email)
        if not _is_valid_email(email):
            raise InvalidEmailError(email)

        try:
            taken = await self.user_repository.email_exists(email)
        except RepositoryError as e:
            raise RepositoryError(f"failed to check email: {e}") from e
        if taken:
            raise EmailAlreadyExistsError(email)

        user = User.create_with_password(
            user_id=str(uuid.uuid4()),
            name=name,
            email=email,
            password=password,
            hash_iterations=self.hash_iterations,
        )

        try:
            await self.user_repository.save(user)
        except RepositoryError as e:
            raise RepositoryError(f"failed to save user: {e}") from e

        session = await self._open_session(user)
        logger.info("User registered", extra={"user_id": str(user.user_id)})
        return user, session

    async def login(self, email: str, password: str) -> Tuple[User, Session]:
        """Authenticate with email and password.

        Raises:
            InvalidCredentialsError: If email is unknown or password is wrong
            NoPasswordError: If the user exists but never set a password
        """
        email = _normalize_email(email)
        try:
            user = await self.user_repository.find_by_email(email)
        except RepositoryError as e:
            raise RepositoryError(f"failed to find user: {e}") from e
        if user is None:
            raise InvalidCredentialsError()

        if not user.has_password():
            raise NoPasswordError(user)

        if not user.verify_password(password):
            logger.warning("Login failed", extra={"user_id": str(user.user_id)})
            raise InvalidCredentialsError()

        session = await self._open_session(user)
        logger.info("User logged in", extra={"user_id": str(user.user_id)})
        return user, session

    async def set_password(self, email: str, password: str) -> Tuple[User, Session]:
        """Set (or replace) the password of an existing user.

        Raises:
            AuthUserNotFoundError: If no user has this email
            PasswordTooShortError: If password is too short
        """
        email = _normalize_email(email)
        try:
            user = await self.user_repository.find_by_email(email)
        except RepositoryError as e:
            raise RepositoryError(f"failed to find user: {e}") from e
        if user is None:
            raise AuthUserNotFoundError(email)

        user.set_password(password, self.hash_iterations)

        try:
            await self.user_repository.save(user)
        except RepositoryError as e:
            raise RepositoryError(f"failed to save user: {e}") from e

        session = await self._open_session(user)
        logger.info("Password set", extra={"user_id": str(user.user_id)})
        return user, session

    async def logout(self, token: str) -> None:
        """Delete the session. Unknown tokens are ignored."""
        try:
            await self.session_repository.delete_by_token(token)
        except RepositoryError as e:
            raise RepositoryError(f"failed to delete session: {e}") from e

    async def validate_session(self, token: str) -> User:
        """Resolve a session token to its user.

        Expired sessions are deleted on the way out.

        Raises:
            SessionExpiredError: If the token is unknown or expired
            AuthUserNotFoundError: If the session owner no longer exists
        """
        try:
            session = await self.session_repository.find_by_token(token)
        except RepositoryError as e:
            raise RepositoryError(f"failed to find session: {e}") from e
        if session is None:
            raise SessionExpiredError()

        if session.is_expired():
            await self.logout(token)
            raise SessionExpiredError()

        try:
            user = await self.user_repository.find_by_id(session.user_id)
        except RepositoryError as e:
            raise RepositoryError(f"failed to find user: {e}") from e
        if user is None:
            raise AuthUserNotFoundError(str(session.user_id))
        return user

    async def cleanup_expired_sessions(self) -> int:
        """Delete every expired session.

        Returns:
            Number of sessions removed
        """
        try:
            removed = await self.session_repository.delete_expired()
        except RepositoryError as e:
            raise RepositoryError(f"failed to clean up expired sessions: {e}") from e
        logger.info(f"Cleaned up {removed} expired sessions")
        return removed

    async def _open_session(self, user: User) -> Session:
        session = Session.create(user.user_id)
        try:
            await self.session_repository.save(session)
        except RepositoryError as e:
            raise RepositoryError(f"failed to create session: {e}") from e
        return session
