"""Service wiring and start-up sequence.

Builds the repositories selected by REPOSITORY_BACKEND, wires the weight
tracker, goal tracker and auth service on top of them, and runs the one-off
start-up maintenance (expired session clean-up).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.goal.goal_tracker import GoalTracker
from application.user.auth_service import AuthService
from application.weight.weight_tracker import WeightTracker
from domain.shared.errors import TrackingError
from infrastructure.config import get_password_hash_iterations, load_environment
from infrastructure.logging_config import configure_logging
from infrastructure.persistence.factory import Repositories, get_repositories

logger = logging.getLogger("startup")


@dataclass
class TrackingServices:
    """Application services sharing one repository set."""

    repositories: Repositories
    weight_tracker: WeightTracker
    goal_tracker: GoalTracker
    auth_service: AuthService


def build_services(repositories: Optional[Repositories] = None) -> TrackingServices:
    """
    Wire the services.

    Args:
        repositories: Repository set to use; created from the environment
            (shared process-wide set when omitted)

    Returns:
        TrackingServices: Ready-to-use services
    """
    repos = repositories if repositories is not None else get_repositories()

    return TrackingServices(
        repositories=repos,
        weight_tracker=WeightTracker(
            user_repository=repos.users,
            weight_repository=repos.weights,
        ),
        goal_tracker=GoalTracker(
            user_repository=repos.users,
            weight_repository=repos.weights,
            goal_repository=repos.goals,
        ),
        auth_service=AuthService(
            user_repository=repos.users,
            session_repository=repos.sessions,
            hash_iterations=get_password_hash_iterations(),
        ),
    )


async def startup(
    services: Optional[TrackingServices] = None,
    env_file: str = ".env",
) -> TrackingServices:
    """
    Start the tracking core.

    1. Load the env file and configure logging
    2. Build services (unless given)
    3. Delete expired sessions once; a failure is logged, not raised

    Args:
        services: Pre-built services (tests)
        env_file: Env file name relative to the backend directory

    Returns:
        TrackingServices: Started services
    """
    load_environment(env_file)
    configure_logging()

    if services is None:
        services = build_services()

    logger.info("startup.config", extra={"backend": services.repositories.backend})

    try:
        removed = await services.auth_service.cleanup_expired_sessions()
        logger.info("startup.sessions_cleaned", extra={"removed": removed})
    except TrackingError as e:
        logger.warning(f"Failed to cleanup expired sessions: {e}")

    logger.info("startup.ready")
    return services
