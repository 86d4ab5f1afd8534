"""UserId value object."""

from dataclasses import dataclass

from domain.shared.errors import InvalidIdentifierError

MAX_USER_ID_LENGTH = 50


@dataclass(frozen=True)
class UserId:
    """User identifier value object.

    Trimmed, non-empty string of at most 50 characters.
    Immutable; equality is value equality on the trimmed string.

    Examples:
        >>> UserId("  giada ").value
        'giada'
    """

    value: str

    def __post_init__(self) -> None:
        """Normalize and validate the identifier."""
        trimmed = (self.value or "").strip()
        if not trimmed:
            raise InvalidIdentifierError("user ID", "cannot be empty")
        if len(trimmed) > MAX_USER_ID_LENGTH:
            raise InvalidIdentifierError(
                "user ID", f"too long ({len(trimmed)} > {MAX_USER_ID_LENGTH} chars)"
            )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        """String representation returns the identifier."""
        return self.value

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"UserId('{self.value}')"
