"""Domain probe for repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events from repository implementations. Adapters take a
probe in their constructor and call it around each contract operation so
every store logs the same events.
"""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from ddd_base.ports.observability.context import ObservationContext


class RepositoryProbe(Protocol):
    """Domain probe for repository operations."""

    def entity_added(self, entity_type: str, entity_id: str) -> None:
        """Record that an aggregate was added."""
        ...

    def entity_updated(self, entity_type: str, entity_id: str) -> None:
        """Record that an aggregate was updated."""
        ...

    def entity_retrieved(self, entity_type: str, entity_id: str) -> None:
        """Record that an aggregate was retrieved."""
        ...

    def entity_not_found(self, entity_type: str, entity_id: str) -> None:
        """Record that an aggregate was not found."""
        ...

    def entity_removed(self, entity_type: str, entity_id: str) -> None:
        """Record that an aggregate was removed."""
        ...

    def duplicate_entity(self, entity_type: str, entity_id: str) -> None:
        """Record that adding an aggregate violated a uniqueness constraint."""
        ...

    def with_context(self, context: ObservationContext) -> RepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRepositoryProbe:
    """Default implementation of RepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultRepositoryProbe(logger=self._logger, context=context)

    def entity_added(self, entity_type: str, entity_id: str) -> None:
        """Record that an aggregate was added."""
        self._logger.info(
            "entity_added",
            entity_type=entity_type,
            entity_id=entity_id,
            **self._get_context_kwargs(),
        )

    def entity_updated(self, entity_type: str, entity_id: str) -> None:
        """Record that an aggregate was updated."""
        self._logger.info(
            "entity_updated",
            entity_type=entity_type,
            entity_id=entity_id,
            **self._get_context_kwargs(),
        )

    def entity_retrieved(self, entity_type: str, entity_id: str) -> None:
        """Record that an aggregate was retrieved."""
        self._logger.debug(
            "entity_retrieved",
            entity_type=entity_type,
            entity_id=entity_id,
            **self._get_context_kwargs(),
        )

    def entity_not_found(self, entity_type: str, entity_id: str) -> None:
        """Record that an aggregate was not found."""
        self._logger.debug(
            "entity_not_found",
            entity_type=entity_type,
            entity_id=entity_id,
            **self._get_context_kwargs(),
        )

    def entity_removed(self, entity_type: str, entity_id: str) -> None:
        """Record that an aggregate was removed."""
        self._logger.info(
            "entity_removed",
            entity_type=entity_type,
            entity_id=entity_id,
            **self._get_context_kwargs(),
        )

    def duplicate_entity(self, entity_type: str, entity_id: str) -> None:
        """Record that adding an aggregate violated a uniqueness constraint."""
        self._logger.warning(
            "duplicate_entity",
            entity_type=entity_type,
            entity_id=entity_id,
            **self._get_context_kwargs(),
        )
