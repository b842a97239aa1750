"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidNameError(ValidationError):
    """A product or menu name is missing, blank, or contains profanity."""


class InvalidPriceError(ValidationError):
    """A price is missing, unparsable, or negative."""


class PriceExceedsSumError(ValidationError):
    """A menu price is higher than the sum of its line items."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    pass


class MenuNotFoundError(EntityNotFoundError):
    pass
