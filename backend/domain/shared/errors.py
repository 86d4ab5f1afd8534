"""Error taxonomy shared by all tracking contexts.

Every domain error derives from one kind below and from the base class of
its own context (user, weight, goal, session), so callers can catch either
by kind or by context.
"""


class TrackingError(Exception):
    """Base exception for the tracking core."""

    pass


class NotFoundError(TrackingError):
    """A user, measurement, goal or session does not exist."""

    pass


class ValidationError(TrackingError):
    """A value object or entity was built from malformed input."""

    pass


class PolicyError(TrackingError):
    """A business rule rejected an otherwise well-formed request."""

    pass


class AuthorizationError(TrackingError):
    """The caller may not act on the requested resource."""

    pass


class RepositoryError(TrackingError):
    """Storage failure, propagated with the context of the failing operation."""

    pass


class InvalidIdentifierError(ValidationError):
    """Identifier is blank or exceeds its length limit."""

    def __init__(self, kind: str, reason: str):
        """Initialize with identifier kind and reason.

        Args:
            kind: Identifier type name (e.g. "user ID")
            reason: Why the value was rejected
        """
        self.kind = kind
        self.reason = reason
        super().__init__(f"{kind} {reason}")
