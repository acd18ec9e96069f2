"""Domain-level exceptions.

Registry operations never raise: missing keys default to zero or are
ignored. These exceptions cover value-object validation and id lookups
made by the application layer on behalf of the CLI, which catches
DomainException uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object was built from an invalid value."""


class EntityNotFoundError(DomainException):
    """A product, user or order id is not registered."""
