"""Observability probes for repository implementations."""

from ddd_base.ports.observability.context import ObservationContext
from ddd_base.ports.observability.repository_probe import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)

__all__ = [
    "DefaultRepositoryProbe",
    "ObservationContext",
    "RepositoryProbe",
]
