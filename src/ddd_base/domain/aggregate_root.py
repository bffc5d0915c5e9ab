"""Aggregate root marker.

An aggregate root is the sole external entry point into a consistency
boundary. Only aggregate roots are reachable directly through a repository;
other entities are reached through their owning root.
"""

from __future__ import annotations

from ddd_base.domain.entity import Entity


class AggregateRoot:
    """Marker mixin for entities that are aggregate roots.

    Carries no behaviour. Combine it with Entity:

        class Order(Entity[OrderId], AggregateRoot):
            ...
    """

    __slots__ = ()


def is_aggregate_root(candidate: object) -> bool:
    """Check that an entity instance or type carries the aggregate root marker.

    Args:
        candidate: An entity instance or an entity class

    Returns:
        True only if candidate is both an Entity and an AggregateRoot
    """
    cls = candidate if isinstance(candidate, type) else type(candidate)
    return issubclass(cls, Entity) and issubclass(cls, AggregateRoot)
