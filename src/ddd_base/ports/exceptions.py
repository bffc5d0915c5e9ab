"""Exceptions for the repository contract.

Repository implementations raise these for failures that are part of the
contract. "Not found" on lookups is a normal result (None or False), never
an exception. Infrastructure failures are the implementation's own concern.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base exception for repository contract failures.

    Attributes:
        entity_type: Name of the aggregate type involved
        entity_id: String rendering of the aggregate identifier
    """

    def __init__(self, message: str, entity_type: str, entity_id: str) -> None:
        super().__init__(message)
        self.entity_type = entity_type
        self.entity_id = entity_id


class EntityNotFoundError(RepositoryError):
    """Raised when updating an aggregate that does not exist."""

    def __init__(self, entity_type: str, entity_id: str) -> None:
        super().__init__(
            f"{entity_type} with id {entity_id} not found",
            entity_type=entity_type,
            entity_id=entity_id,
        )


class DuplicateEntityError(RepositoryError):
    """Raised when adding an aggregate violates a uniqueness constraint.

    The application layer should handle this and provide appropriate
    feedback to the user.
    """

    def __init__(self, entity_type: str, entity_id: str) -> None:
        super().__init__(
            f"{entity_type} with id {entity_id} already exists",
            entity_type=entity_type,
            entity_id=entity_id,
        )
