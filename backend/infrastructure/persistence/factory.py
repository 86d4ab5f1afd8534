"""Repository Factory for Persistence Layer.

Environment-based repository selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory (safe fallback if env vars not set)

Usage:
    from infrastructure.persistence.factory import create_repositories

    repositories = create_repositories()
    await repositories.weights.find_latest_by_user_id(user_id)
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient

from domain.goal.core.ports.goal_repository import IGoalRepository
from domain.session.core.ports.session_repository import ISessionRepository
from domain.user.core.ports.user_repository import IUserRepository
from domain.weight.core.ports.weight_repository import IWeightRepository
from infrastructure.config import get_repository_backend
from infrastructure.persistence.in_memory import (
    InMemoryGoalRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
    InMemoryWeightRepository,
)
from infrastructure.persistence.mongodb import (
    MongoGoalRepository,
    MongoSessionRepository,
    MongoUserRepository,
    MongoWeightRepository,
    create_mongo_client,
)

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    """One repository per aggregate, sharing the same backend."""

    users: IUserRepository
    weights: IWeightRepository
    goals: IGoalRepository
    sessions: ISessionRepository
    backend: str


def create_repositories(
    backend: Optional[str] = None,
    client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None,
) -> Repositories:
    """Create all repositories based on REPOSITORY_BACKEND env var.

    Environment variable: REPOSITORY_BACKEND
    Values:
        - "inmemory": In-memory repositories (default, fast, transient)
        - "mongodb": MongoDB repositories (persistent, requires MONGODB_URI)

    Args:
        backend: Explicit backend, overrides the environment
        client: Motor client to share (mongodb only, created from config
            when omitted)

    Returns:
        Repositories: Repository set

    Raises:
        ValueError: If the backend is unknown, or mongodb is selected
            without MONGODB_URI

    Example:
        # In .env (production):
        REPOSITORY_BACKEND=mongodb
        MONGODB_URI=mongodb://localhost:27017

        # In .env.test (testing):
        REPOSITORY_BACKEND=inmemory
    """
    mode = (backend or get_repository_backend()).lower()

    if mode == "mongodb":
        shared_client = client if client is not None else create_mongo_client()
        logger.info("Using MongoDB repositories")
        return Repositories(
            users=MongoUserRepository(shared_client),
            weights=MongoWeightRepository(shared_client),
            goals=MongoGoalRepository(shared_client),
            sessions=MongoSessionRepository(shared_client),
            backend="mongodb",
        )

    if mode != "inmemory":
        raise ValueError(
            f"Invalid repository backend: {mode}. Expected 'inmemory' or 'mongodb'"
        )

    logger.info("Using in-memory repositories")
    return Repositories(
        users=InMemoryUserRepository(),
        weights=InMemoryWeightRepository(),
        goals=InMemoryGoalRepository(),
        sessions=InMemorySessionRepository(),
        backend="inmemory",
    )


# Singleton instance (lazy initialization)
_repositories: Optional[Repositories] = None


def get_repositories() -> Repositories:
    """Get singleton repository set."""
    global _repositories
    if _repositories is None:
        _repositories = create_repositories()
    return _repositories


def reset_repositories() -> None:
    """Reset singleton repository set.

    Useful for testing to force re-creation with different env vars.
    """
    global _repositories
    _repositories = None
