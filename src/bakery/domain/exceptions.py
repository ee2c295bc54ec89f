"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ModificationWindowClosedError(ValidationError):
    """The order can no longer be edited or cancelled."""


class DuplicateOrderError(ValidationError):
    """The customer already has an order for that delivery date."""
