"""Unit tests for repository contract exceptions."""

import pytest

from ddd_base.ports import DuplicateEntityError, EntityNotFoundError, RepositoryError


class TestEntityNotFoundError:
    """Tests for EntityNotFoundError."""

    def test_carries_entity_details(self):
        """The error exposes the aggregate type and id."""
        error = EntityNotFoundError("Product", "42")

        assert error.entity_type == "Product"
        assert error.entity_id == "42"
        assert str(error) == "Product with id 42 not found"

    def test_is_repository_error(self):
        """Callers can catch all contract failures through the base class."""
        with pytest.raises(RepositoryError):
            raise EntityNotFoundError("Product", "42")


class TestDuplicateEntityError:
    """Tests for DuplicateEntityError."""

    def test_carries_entity_details(self):
        """The error exposes the aggregate type and id."""
        error = DuplicateEntityError("Product", "42")

        assert error.entity_type == "Product"
        assert error.entity_id == "42"
        assert "already exists" in str(error)

    def test_is_repository_error(self):
        """Duplicate errors are repository errors, not domain errors."""
        assert isinstance(DuplicateEntityError("Product", "1"), RepositoryError)
        assert not isinstance(DuplicateEntityError("Product", "1"), ValueError)
