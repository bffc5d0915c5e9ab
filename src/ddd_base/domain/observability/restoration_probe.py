"""Observability probes for entity restoration.

Domain probes following the Domain Oriented Observability pattern. Probes
emit structured logs when a mapping collaborator restores the identity of
an entity created through the restoration path.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import Protocol

import structlog


class RestorationProbe(Protocol):
    """Protocol for entity restoration observability probes."""

    def identity_restored(self, entity_type: str, entity_id: str) -> None:
        """Probe emitted when an entity receives its identity.

        Args:
            entity_type: Concrete entity class name
            entity_id: String rendering of the restored identifier
        """
        ...

    def restoration_rejected(self, entity_type: str, reason: str) -> None:
        """Probe emitted when a restoration attempt is refused.

        Args:
            entity_type: Concrete entity class name
            reason: Short machine-readable reason (e.g. "missing_id")
        """
        ...


class DefaultRestorationProbe:
    """Default implementation of RestorationProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._logger = logger or structlog.get_logger()

    def identity_restored(self, entity_type: str, entity_id: str) -> None:
        """Log identity restoration with structured context."""
        self._logger.debug(
            "entity_identity_restored",
            entity_type=entity_type,
            entity_id=entity_id,
        )

    def restoration_rejected(self, entity_type: str, reason: str) -> None:
        """Log a refused restoration with structured context."""
        self._logger.warning(
            "entity_restoration_rejected",
            entity_type=entity_type,
            reason=reason,
        )
