"""Session domain exceptions."""

from domain.shared.errors import PolicyError, TrackingError, ValidationError


class SessionDomainError(TrackingError):
    """Base exception for Session domain errors."""

    pass


class SessionExpiredError(SessionDomainError, PolicyError):
    """Session token is unknown or past its expiry.

    Both cases share this error at the service boundary.
    """

    def __init__(self) -> None:
        super().__init__("Session expired")


class InvalidSessionIdError(SessionDomainError, ValidationError):
    """Session ID is blank or not a UUID."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid session ID format: {value!r}")
