"""Domain-level exceptions.

Every rule violation is a subclass of DomainException so the CLI layer
can catch them uniformly and display user-friendly messages.

The inventory store itself never raises these for unknown targets or
oversized sales; the application handlers check first.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested product or variant does not exist."""


class InsufficientStockError(ValidationError):
    """A sale asks for more sets than a variant has on hand."""


class DuplicateVariantError(ValidationError):
    """A product already has a variant with the requested volume."""


class PersistenceError(DomainException):
    """The persisted inventory blob could not be understood."""
