"""Value object base type.

Value objects are immutable descriptors whose equality is determined entirely
by the values of their significant components, never by identity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import zip_longest
from typing import Any, Iterable, cast

_MISSING = object()


class ValueObject(ABC):
    """Base class for structurally-equal, immutable domain values.

    Subclasses list their significant fields, in order, from
    `_equality_components()`. Concrete value objects are declared as frozen
    dataclasses with `eq=False` so the equality and hash defined here are
    kept instead of the dataclass-generated ones:

        @dataclass(frozen=True, eq=False)
        class Address(ValueObject):
            street: str
            city: str
            postal_code: str

            def _equality_components(self) -> Iterable[Any]:
                yield self.street
                yield self.city
                yield self.postal_code

    The hash is an XOR fold of the component hashes and is order-insensitive:
    permuted components hash the same.
    """

    __slots__ = ()

    @abstractmethod
    def _equality_components(self) -> Iterable[Any]:
        """Return the ordered components that define equality."""
        ...

    def __eq__(self, other: object) -> bool:
        """Value objects are equal when type and components match in order."""
        if other is None or type(self) is not type(other):
            return False
        if self is other:
            return True

        for left, right in zip_longest(
            self._equality_components(),
            cast(ValueObject, other)._equality_components(),
            fillvalue=_MISSING,
        ):
            if left is _MISSING or right is _MISSING:
                return False
            if left is right:
                continue
            if left is None or right is None:
                return False
            if left != right:
                return False
        return True

    def __hash__(self) -> int:
        """XOR fold of component hashes; None components contribute 0."""
        result = 0
        for component in self._equality_components():
            result ^= 0 if component is None else hash(component)
        return result
