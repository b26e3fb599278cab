"""Map domain failures to click exceptions with distinct exit codes.

  2  malformed request   (ValidationError and subclasses)
  3  sweet not found     (EntityNotFoundError)
  4  business rule       (DuplicateIdError, InsufficientStockError)
"""

from __future__ import annotations

import click

from sweetshop.domain.exceptions import (
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)

EXIT_INVALID = 2
EXIT_NOT_FOUND = 3
EXIT_REFUSED = 4


class DomainClickException(click.ClickException):

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def cli_error(exc: DomainException) -> click.ClickException:
    if isinstance(exc, ValidationError):
        return DomainClickException(str(exc), EXIT_INVALID)
    if isinstance(exc, EntityNotFoundError):
        return DomainClickException(str(exc), EXIT_NOT_FOUND)
    if isinstance(exc, BusinessRuleViolation):
        return DomainClickException(str(exc), EXIT_REFUSED)
    return click.ClickException(str(exc))
