"""Domain-level exceptions.

Business rule violations are subclasses of DomainException so the
application layer can turn them into failure results uniformly.
Storage failures are kept apart: they are not the caller's fault and
propagate up to the CLI.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EmptyProductListError(ValidationError):
    """An order was built without any product."""


class RepositoryError(Exception):
    """The backing store could not be read or written."""
