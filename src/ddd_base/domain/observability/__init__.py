"""Domain-Oriented Observability for the domain layer.

Probes for entity restoration following Domain-Oriented Observability patterns.
"""

from ddd_base.domain.observability.restoration_probe import (
    DefaultRestorationProbe,
    RestorationProbe,
)

__all__ = [
    "DefaultRestorationProbe",
    "RestorationProbe",
]
