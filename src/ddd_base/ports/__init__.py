"""Ports for the persistence of aggregate roots.

Ports define interfaces; implementations against a concrete store live
outside this package.
"""

from ddd_base.ports.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    RepositoryError,
)
from ddd_base.ports.repositories import IRepository

__all__ = [
    "DuplicateEntityError",
    "EntityNotFoundError",
    "IRepository",
    "RepositoryError",
]
