"""Domain building blocks.

Value objects, identifiers, entities and the aggregate root marker. This
layer is pure: it performs no I/O and depends only on logging.
"""

from ddd_base.domain.aggregate_root import AggregateRoot, is_aggregate_root
from ddd_base.domain.entity import Entity, entities_differ, entities_equal
from ddd_base.domain.exceptions import (
    DomainError,
    InvalidValueError,
    MissingValueError,
)
from ddd_base.domain.identifiers import Identifier, IntegerIdentifier, UlidIdentifier
from ddd_base.domain.value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "DomainError",
    "Entity",
    "Identifier",
    "IntegerIdentifier",
    "InvalidValueError",
    "MissingValueError",
    "UlidIdentifier",
    "ValueObject",
    "entities_differ",
    "entities_equal",
    "is_aggregate_root",
]
