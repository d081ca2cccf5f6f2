"""Domain-level exceptions.

Every rule violation raised by the order lifecycle is a subclass of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException):
    """The caller supplied missing or malformed input."""


class InvalidStateError(DomainException):
    """The entity's current status forbids the requested operation."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OrderNotFoundError(EntityNotFoundError):
    """No active order matches the given id."""


class CartNotFoundError(EntityNotFoundError):
    """The referenced cart does not exist."""
