"""GoalId value object - identifier of a goal."""

from dataclasses import dataclass

from domain.shared.errors import InvalidIdentifierError


@dataclass(frozen=True)
class GoalId:
    """Identifier of a weight goal.

    Trimmed, non-empty string. Generated ids look like
    ``goal_<user_id>_<timestamp_ns>``.
    """

    value: str

    def __post_init__(self) -> None:
        trimmed = (self.value or "").strip()
        if not trimmed:
            raise InvalidIdentifierError("goal ID", "cannot be empty")
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"GoalId('{self.value}')"
