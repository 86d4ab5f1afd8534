"""MongoDB repository implementations."""

from .base import MongoBaseRepository, create_mongo_client
from .goal_repository import MongoGoalRepository
from .session_repository import MongoSessionRepository
from .user_repository import MongoUserRepository
from .weight_repository import MongoWeightRepository

__all__ = [
    "MongoBaseRepository",
    "create_mongo_client",
    "MongoUserRepository",
    "MongoWeightRepository",
    "MongoGoalRepository",
    "MongoSessionRepository",
]
