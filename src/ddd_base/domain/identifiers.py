"""Identifier value objects.

Identifiers are value objects wrapping exactly one opaque value that names
an entity. Each entity type declares its own identifier subclass so that
identifiers of different entity types never compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Self, TypeVar

from ulid import ULID

from ddd_base.domain.exceptions import InvalidValueError, MissingValueError
from ddd_base.domain.value_object import ValueObject

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class Identifier(ValueObject, Generic[T]):
    """Base identifier wrapping a single non-null value.

    Equality and hashing come from ValueObject, using the wrapped value as
    the only component. Two identifiers are equal only when they are of the
    same concrete type.

    Raises:
        MissingValueError: If value is None
        TypeError: If Identifier itself is instantiated
    """

    value: T

    def __post_init__(self) -> None:
        """Validate the wrapped value after initialization."""
        if type(self) is Identifier:
            raise TypeError("Identifier is abstract; declare a subclass per entity")
        if self.value is None:
            raise MissingValueError(
                f"{type(self).__name__} value cannot be None"
            )

    def _equality_components(self) -> Iterable[Any]:
        yield self.value

    def __str__(self) -> str:
        """Return the wrapped value's string form."""
        if self.value is None:
            return ""
        return str(self.value)


class IntegerIdentifier(Identifier[int]):
    """Identifier backed by a positive integer.

    Example:
        >>> class OrderId(IntegerIdentifier):
        ...     pass
        >>> order_id = OrderId.from_int(123)
        >>> int(order_id)
        123
    """

    def __post_init__(self) -> None:
        """Validate that the value is a positive integer."""
        super().__post_init__()
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidValueError(
                f"{type(self).__name__} value must be an integer, "
                f"got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidValueError(
                f"{type(self).__name__} value must be greater than zero, "
                f"got {self.value}"
            )

    @property
    def integer_value(self) -> int:
        """The wrapped integer."""
        return self.value

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Create an identifier from a raw integer.

        Args:
            value: Positive integer

        Returns:
            Identifier instance

        Raises:
            InvalidValueError: If value is not a positive integer
        """
        return cls(value=value)

    def __int__(self) -> int:
        return self.value


class UlidIdentifier(Identifier[str]):
    """Identifier backed by a ULID string.

    Uses ULID for sortability and distribution-friendly generation.

    Raises:
        MissingValueError: If value is None
        InvalidValueError: If value is not a valid ULID string
    """

    def __post_init__(self) -> None:
        """Validate that the value is a well-formed ULID string."""
        super().__post_init__()
        try:
            ULID.from_str(self.value)
        except (TypeError, ValueError) as e:
            raise InvalidValueError(
                f"Invalid {type(self).__name__}: {self.value!r}"
            ) from e

    @classmethod
    def generate(cls) -> Self:
        """Generate a new identifier using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create an identifier from a string value.

        Args:
            value: ULID string

        Returns:
            Identifier instance

        Raises:
            MissingValueError: If value is None
            InvalidValueError: If value is not a valid ULID
        """
        return cls(value=value)
