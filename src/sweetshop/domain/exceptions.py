"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly.  They fall into three families that the
boundary must never conflate:

- ``ValidationError``        the request itself is malformed
- ``EntityNotFoundError``    the targeted sweet does not exist
- ``BusinessRuleViolation``  well-formed request refused by a business rule
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field, argument or query failed validation.

    ``errors`` maps each offending field to its own message so callers
    can report every problem, not just the first one.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.errors: dict[str, str] = dict(errors or {})


class InvalidEntityError(ValidationError):
    """The entity reference handed to the store is absent or of the wrong type."""


class InvalidArgumentError(ValidationError):
    """An identifier or other operation argument is malformed."""


class InvalidQuantityError(InvalidArgumentError):
    """A purchase or restock amount is not a positive whole number."""


class InvalidRangeError(ValidationError):
    """Search price bounds are inverted (min greater than max)."""


class EmptyCriteriaError(ValidationError):
    """A search was requested without any meaningful criterion."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class BusinessRuleViolation(DomainException):
    """A well-formed request was refused by a business rule."""


class DuplicateIdError(BusinessRuleViolation):
    """A sweet with the same ID is already stored."""


class InsufficientStockError(BusinessRuleViolation):
    """A purchase asks for more units than are in stock."""
