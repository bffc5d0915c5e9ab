"""Entity base type.

Entities are domain objects whose identity, not their field values,
determines equality. Identity is carried by an Identifier subclass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, Self, TypeVar, cast

from ddd_base.domain.exceptions import MissingValueError
from ddd_base.domain.identifiers import Identifier
from ddd_base.domain.observability.restoration_probe import (
    DefaultRestorationProbe,
    RestorationProbe,
)

TId = TypeVar("TId", bound=Identifier[Any])


@dataclass(eq=False)
class Entity(Generic[TId]):
    """Base class for identity-equal domain objects.

    Two entities are equal when they are of the same concrete type and their
    ids are equal; every other attribute is ignored. Subclasses add state
    with `@dataclass(eq=False)` or with a plain `__init__` that calls
    `super().__init__(id)`:

        @dataclass(eq=False)
        class Product(Entity[ProductId], AggregateRoot):
            name: str
            price: Decimal

    Entities are normally built with an id. Mapping collaborators that load
    entities from a store use `reconstitute()` instead, which bypasses the
    subclass constructor. An entity created with `for_restoration()` has no
    id until `restore_id()` is called; letting it reach application code in
    that state is a contract violation by the caller.

    Once set, the id cannot be reassigned.

    Raises:
        MissingValueError: If id is None
        TypeError: If Entity itself is instantiated
    """

    id: TId

    def __post_init__(self) -> None:
        """Validate identity after initialization."""
        if type(self) is Entity:
            raise TypeError("Entity is abstract; declare a subclass")
        if self.id is None:
            raise MissingValueError(f"{type(self).__name__} id cannot be None")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and getattr(self, "id", None) is not None:
            raise AttributeError(
                f"{type(self).__name__} identity cannot be changed once set"
            )
        super().__setattr__(name, value)

    @classmethod
    def for_restoration(cls) -> Self:
        """Create a bare instance with no id for a mapping collaborator.

        No constructor runs. The caller must call `restore_id()` before the
        entity is exposed to application logic.
        """
        entity = cls.__new__(cls)
        object.__setattr__(entity, "id", None)
        return entity

    @classmethod
    def reconstitute(
        cls,
        id: TId,
        state: Mapping[str, Any] | None = None,
        *,
        probe: RestorationProbe | None = None,
    ) -> Self:
        """Rebuild an entity from stored state.

        Stored attributes arrive as a mapping keyed by attribute name, so a
        field named `probe` is restored like any other.

        Args:
            id: The stored identifier
            state: Attribute values to assign, bypassing the constructor
            probe: Optional observability probe for restoration events

        Returns:
            Entity with identity and state restored

        Raises:
            MissingValueError: If id is None
        """
        entity = cls.for_restoration()
        entity.restore_id(id, probe=probe)
        for name, value in (state or {}).items():
            setattr(entity, name, value)
        return entity

    def restore_id(self, id: TId, probe: RestorationProbe | None = None) -> None:
        """Assign the identity of an entity created by `for_restoration()`.

        Args:
            id: The stored identifier
            probe: Optional observability probe for restoration events

        Raises:
            MissingValueError: If id is None
            AttributeError: If the entity already has an identity
        """
        probe = probe or DefaultRestorationProbe()
        entity_type = type(self).__name__

        if id is None:
            probe.restoration_rejected(entity_type=entity_type, reason="missing_id")
            raise MissingValueError(f"{entity_type} id cannot be None")

        if self.id is not None:
            probe.restoration_rejected(
                entity_type=entity_type, reason="identity_already_set"
            )
            raise AttributeError(f"{entity_type} identity cannot be changed once set")

        self.id = id
        probe.identity_restored(entity_type=entity_type, entity_id=str(id))

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same type and ID (identity-based equality)."""
        if other is None or type(self) is not type(other):
            return False
        if self is other:
            return True

        other_id = cast(Entity[Any], other).id
        if self.id is None or other_id is None:
            return False
        return self.id == other_id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        if self.id is None:
            return 0
        return hash(self.id)

    def __str__(self) -> str:
        """Return string representation."""
        return f"{type(self).__name__} [Id={self.id}]"


def entities_equal(left: Entity[Any] | None, right: Entity[Any] | None) -> bool:
    """Compare two possibly-missing entities.

    Two missing entities are equal; a missing entity never equals a present
    one. Never raises.
    """
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return left == right


def entities_differ(left: Entity[Any] | None, right: Entity[Any] | None) -> bool:
    """Negation of `entities_equal`."""
    return not entities_equal(left, right)
