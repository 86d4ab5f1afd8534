"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.goal_repository import (
    InMemoryGoalRepository,
)
from infrastructure.persistence.in_memory.session_repository import (
    InMemorySessionRepository,
)
from infrastructure.persistence.in_memory.user_repository import (
    InMemoryUserRepository,
)
from infrastructure.persistence.in_memory.weight_repository import (
    InMemoryWeightRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "InMemoryWeightRepository",
    "InMemoryGoalRepository",
    "InMemorySessionRepository",
]
