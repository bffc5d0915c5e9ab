"""Domain-Driven Design building blocks.

This package contains the small, carefully managed set of components that
bounded contexts agree to depend on: value objects, identifiers, entities,
the aggregate root marker and the repository contract.

Call `configure_logging()` at application startup to route the structlog
events emitted by the restoration and repository probes.
"""

from ddd_base.domain import (
    AggregateRoot,
    Entity,
    Identifier,
    IntegerIdentifier,
    InvalidValueError,
    MissingValueError,
    UlidIdentifier,
    ValueObject,
    entities_differ,
    entities_equal,
    is_aggregate_root,
)
from ddd_base.infrastructure import configure_logging
from ddd_base.infrastructure.version import __version__
from ddd_base.ports import (
    DuplicateEntityError,
    EntityNotFoundError,
    IRepository,
)

__all__ = [
    "__version__",
    "AggregateRoot",
    "DuplicateEntityError",
    "Entity",
    "EntityNotFoundError",
    "IRepository",
    "Identifier",
    "IntegerIdentifier",
    "InvalidValueError",
    "MissingValueError",
    "UlidIdentifier",
    "ValueObject",
    "configure_logging",
    "entities_differ",
    "entities_equal",
    "is_aggregate_root",
]
