"""Domain exceptions raised while constructing building blocks.

Both exceptions are raised synchronously during construction; the object
under construction is never returned. They subclass ValueError so callers
validating plain input can catch them without importing this module.
"""


class DomainError(Exception):
    """Base exception for domain building block violations."""

    pass


class MissingValueError(DomainError, ValueError):
    """Raised when a required identifier or identifier value is None.

    Entities cannot be constructed without an identity, and identifiers
    cannot wrap a missing value.
    """

    pass


class InvalidValueError(DomainError, ValueError):
    """Raised when a value fails a domain constraint.

    For example, an integer identifier that is zero or negative, or a
    ULID identifier built from a malformed string.
    """

    pass
