"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the API and CLI layers can catch them uniformly and translate them into
status codes or user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateNameError(ValidationError):
    """A name that must be unique is already taken."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
