"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyCartError(DomainException):
    """Checkout was attempted with no items in the cart."""


class SubmissionError(DomainException):
    """A backend call failed; local state was left as it was before the call."""


class BackendError(DomainException):
    """The backend could not be reached or answered with garbage."""


class PrintError(DomainException):
    """The receipt printer failed. Never affects a committed order."""
