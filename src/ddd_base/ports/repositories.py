"""Repository protocol (port) for aggregate roots.

The repository protocol defines the interface for persisting and retrieving
aggregates. This package ships no implementation; storage adapters implement
the protocol against a concrete store and reconstitute complete aggregates
with `Entity.reconstitute()`.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from ddd_base.domain.entity import Entity
from ddd_base.domain.identifiers import Identifier

TAggregate = TypeVar("TAggregate", bound=Entity[Any])
TId = TypeVar("TId", bound=Identifier[Any])


@runtime_checkable
class IRepository(Protocol[TAggregate, TId]):
    """Repository for aggregate root persistence.

    TAggregate must be an Entity that also carries the AggregateRoot
    marker; the type system only expresses the Entity half, so adapters
    should check the marker with `is_aggregate_root()` when they are built.

    All operations are coroutines. Cancellation is cooperative through
    asyncio task cancellation; implementations must let
    `asyncio.CancelledError` propagate without leaving the store in a
    partial state. No ordering is guaranteed between concurrent calls, and
    isolation and locking are left to the implementation.
    """

    async def get_by_id(self, id: TId) -> TAggregate | None:
        """Retrieve an aggregate by its ID.

        Args:
            id: The unique identifier of the aggregate

        Returns:
            The aggregate, or None if not found. Not found is never an error.
        """
        ...

    async def get_all(self) -> list[TAggregate]:
        """List all aggregates.

        Returns:
            List of aggregates, empty if there are none
        """
        ...

    async def get_by_predicate(
        self, predicate: Callable[[TAggregate], bool]
    ) -> list[TAggregate]:
        """List aggregates matching a filter.

        Args:
            predicate: Filter over aggregate attributes

        Returns:
            List of matching aggregates, empty if none match
        """
        ...

    async def add(self, aggregate: TAggregate) -> TAggregate:
        """Persist a new aggregate.

        Args:
            aggregate: The aggregate to add

        Returns:
            The persisted aggregate, with any store-assigned fields populated

        Raises:
            DuplicateEntityError: If the aggregate violates a uniqueness constraint
        """
        ...

    async def update(self, aggregate: TAggregate) -> TAggregate:
        """Persist changes to an existing aggregate.

        Args:
            aggregate: The aggregate to update

        Returns:
            The persisted aggregate

        Raises:
            EntityNotFoundError: If the aggregate does not exist
        """
        ...

    async def remove_by_id(self, id: TId) -> bool:
        """Delete an aggregate by its ID.

        Args:
            id: The unique identifier of the aggregate

        Returns:
            True if deleted, False if not found
        """
        ...

    async def remove(self, aggregate: TAggregate) -> bool:
        """Delete an aggregate.

        Args:
            aggregate: The aggregate to delete

        Returns:
            True if deleted, False if not found
        """
        ...

    async def exists(self, id: TId) -> bool:
        """Check whether an aggregate with the given ID exists.

        Args:
            id: The unique identifier of the aggregate

        Returns:
            True if it exists, False otherwise
        """
        ...

    async def count(
        self, predicate: Callable[[TAggregate], bool] | None = None
    ) -> int:
        """Count aggregates, optionally only those matching a filter.

        Args:
            predicate: Optional filter over aggregate attributes

        Returns:
            Number of aggregates (matching the filter, if given)
        """
        ...
