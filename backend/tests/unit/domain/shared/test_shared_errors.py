"""Unit tests for the shared error taxonomy and identifiers."""

import re

import pytest
from freezegun import freeze_time

from domain.goal.core.exceptions import GoalDomainError, GoalNotFoundError
from domain.shared.errors import (
    AuthorizationError,
    InvalidIdentifierError,
    NotFoundError,
    RepositoryError,
    TrackingError,
    ValidationError,
)
from domain.shared.identifiers import generate_entity_id
from domain.weight.core.exceptions import WeightNotFoundError, WeightOwnershipError


class TestErrorTaxonomy:
    """Errors can be caught by kind or by context."""

    def test_catch_by_kind(self):
        """Test catching not-found errors across contexts."""
        for error in (WeightNotFoundError("w"), GoalNotFoundError("g")):
            with pytest.raises(NotFoundError):
                raise error

    def test_catch_by_context(self):
        """Test catching goal errors regardless of kind."""
        with pytest.raises(GoalDomainError):
            raise GoalNotFoundError("g")

    def test_ownership_is_authorization(self):
        """Test cross-user access kind."""
        error = WeightOwnershipError("weight_1", "marco")

        assert isinstance(error, AuthorizationError)
        assert error.weight_id == "weight_1"
        assert error.user_id == "marco"

    def test_repository_error_is_tracking_error(self):
        """Test the infrastructure kind."""
        assert issubclass(RepositoryError, TrackingError)
        assert not issubclass(RepositoryError, ValidationError)

    def test_invalid_identifier_fields(self):
        """Test InvalidIdentifierError attributes."""
        error = InvalidIdentifierError("user ID", "cannot be empty")

        assert error.kind == "user ID"
        assert error.reason == "cannot be empty"
        assert str(error) == "user ID cannot be empty"


class TestGenerateEntityId:
    """Test identifier generation."""

    def test_format(self):
        """Test the prefix_owner_timestamp layout."""
        entity_id = generate_entity_id("weight", "giada")

        assert re.fullmatch(r"weight_giada_\d+", entity_id)

    @freeze_time("2025-06-15 12:00:00")
    def test_unique_when_clock_is_frozen(self):
        """Test that ids stay unique even without clock progress."""
        ids = {generate_entity_id("goal", "giada") for _ in range(100)}

        assert len(ids) == 100
