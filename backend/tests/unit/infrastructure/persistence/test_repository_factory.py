"""Unit tests for the repository factory.

Tests environment-based repository selection.
"""

import pytest
from unittest.mock import MagicMock

from infrastructure.persistence.factory import (
    create_repositories,
    get_repositories,
    reset_repositories,
)
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
)


class TestCreateRepositories:
    """Test create_repositories() factory function."""

    def test_default_to_inmemory_when_env_not_set(self, monkeypatch):
        """Should return in-memory repositories when REPOSITORY_BACKEND not set."""
        monkeypatch.delenv("REPOSITORY_BACKEND", raising=False)

        repos = create_repositories()

        assert repos.backend == "inmemory"
        assert isinstance(repos.users, InMemoryUserRepository)
        assert isinstance(repos.weights, InMemoryWeightRepository)
        assert isinstance(repos.goals, InMemoryGoalRepository)
        assert isinstance(repos.sessions, InMemorySessionRepository)

    def test_explicit_backend_overrides_env(self, monkeypatch):
        """Explicit argument wins over REPOSITORY_BACKEND."""
        monkeypatch.setenv("REPOSITORY_BACKEND", "mongodb")

        repos = create_repositories("InMemory")

        assert repos.backend == "inmemory"

    def test_mongodb_shares_one_client(self, monkeypatch):
        """Should build every Mongo repository on the given client."""
        monkeypatch.setenv("REPOSITORY_BACKEND", "mongodb")
        client = MagicMock()

        repos = create_repositories(client=client)

        assert repos.backend == "mongodb"
        assert isinstance(repos.users, MongoUserRepository)
        assert isinstance(repos.weights, MongoWeightRepository)
        assert isinstance(repos.goals, MongoGoalRepository)
        assert isinstance(repos.sessions, MongoSessionRepository)
        assert all(
            repo._client is client
            for repo in (repos.users, repos.weights, repos.goals, repos.sessions)
        )

    def test_mongodb_without_uri_raises_error(self, monkeypatch):
        """Should raise ValueError when mongodb but no MONGODB_URI."""
        monkeypatch.setenv("REPOSITORY_BACKEND", "mongodb")
        monkeypatch.delenv("MONGODB_URI", raising=False)

        with pytest.raises(ValueError, match="MONGODB_URI not configured"):
            create_repositories()

    def test_unknown_backend(self):
        """Should reject unknown explicit backends."""
        with pytest.raises(ValueError, match="Invalid repository backend"):
            create_repositories("redis")

    def test_invalid_env_value(self, monkeypatch):
        """Should reject unknown REPOSITORY_BACKEND values."""
        monkeypatch.setenv("REPOSITORY_BACKEND", "redis")

        with pytest.raises(ValueError, match="Invalid REPOSITORY_BACKEND"):
            create_repositories()


class TestSingletonGetter:
    """Test singleton get_repositories() function."""

    def setup_method(self):
        """Reset singleton before each test."""
        reset_repositories()

    def teardown_method(self):
        reset_repositories()

    def test_get_repositories_singleton(self, monkeypatch):
        """get_repositories() should return same instance on multiple calls."""
        monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")

        assert get_repositories() is get_repositories()

    def test_reset_clears_singleton(self, monkeypatch):
        """reset_repositories() should clear cached instance."""
        monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")

        first = get_repositories()
        reset_repositories()
        second = get_repositories()

        assert first is not second
