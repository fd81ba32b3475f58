"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
None of them are retryable: a caller must block the mutation and ask for
corrected input rather than fall back to a zero or guessed price.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidLocationError(ValidationError):
    """A location outside the closed set of kitchens was given."""


class InvalidQuantityError(ValidationError):
    """A line item quantity was not a positive integer."""


class UnknownMenuItemError(EntityNotFoundError):
    """A menu item is neither in the loaded catalog nor already priced."""
