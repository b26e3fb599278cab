"""Sweet entity — a sellable catalogue item and its stock level.

A Sweet validates itself on construction and on every later field
assignment, so an invalid one can never exist.  Quantity normally
changes through ``purchase()`` and ``restock()``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sweetshop.domain.exceptions import (
    InsufficientStockError,
    InvalidEntityError,
    InvalidQuantityError,
    ValidationError,
)
from sweetshop.domain.model.validation import (
    collect_violations,
    describe,
    field_violation,
    is_positive_int,
    normalize_field,
)

logger = logging.getLogger(__name__)

SWEET_FIELDS = ("id", "name", "category", "price", "quantity")


@dataclass
class Sweet:
    """Aggregate root for a catalogue item.

    Invariants:
    - ``id`` is a positive integer and never changes
    - ``name`` and ``category`` are non-empty (stored trimmed)
    - ``price`` >= 0
    - ``quantity`` is an integer >= 0
    """

    id: int
    name: str
    category: str
    price: float
    quantity: int

    def __post_init__(self) -> None:
        errors = collect_violations(
            self.id, self.name, self.category, self.price, self.quantity
        )
        if errors:
            raise ValidationError(f"Invalid sweet: {describe(errors)}", errors)
        for field in SWEET_FIELDS:
            object.__setattr__(self, field, normalize_field(field, getattr(self, field)))

    def __setattr__(self, key: str, value: Any) -> None:
        # first assignments come from __init__ and are checked together
        # in __post_init__
        if key in SWEET_FIELDS and key in self.__dict__:
            if key == "id":
                raise AttributeError("Sweet id is immutable")
            message = field_violation(key, value)
            if message is not None:
                raise ValidationError(f"Invalid sweet: {message}", {key: message})
            value = normalize_field(key, value)
        super().__setattr__(key, value)

    # --- Stock transitions ----------------------------------------------------

    def can_purchase(self, amount: int) -> bool:
        return is_positive_int(amount) and self.quantity >= amount

    def purchase(self, amount: int) -> None:
        """Take *amount* units out of stock.

        Raises InvalidQuantityError for a non-positive or non-integer
        amount and InsufficientStockError when stock is too low.
        """
        amount = check_amount(amount, "Purchase")
        if not self.can_purchase(amount):
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(need {amount}, have {self.quantity})"
            )
        self.quantity -= amount

    def restock(self, amount: int) -> None:
        """Add *amount* units to stock.  There is no upper bound."""
        amount = check_amount(amount, "Restock")
        self.quantity += amount


def check_amount(amount: Any, action: str) -> int:
    """Return *amount* as an int, or raise InvalidQuantityError."""
    if not is_positive_int(amount):
        raise InvalidQuantityError(
            f"{action} quantity must be a positive integer, got {amount!r}",
            {"quantity": "must be a positive integer"},
        )
    return int(amount)


def validate_sweet(candidate: Mapping[str, Any]) -> Sweet:
    """Build a Sweet from raw field values.

    Missing keys are reported alongside any other violation; the raised
    ValidationError lists every offending field.
    """
    if not isinstance(candidate, Mapping):
        raise InvalidEntityError(
            f"Sweet data must be a mapping, got {type(candidate).__name__}"
        )
    missing = {f: f"{f} is required" for f in SWEET_FIELDS if f not in candidate}
    errors = collect_violations(*(candidate.get(f) for f in SWEET_FIELDS))
    errors.update(missing)
    if errors:
        logger.warning("Rejected sweet %r: %s", candidate.get("name"), describe(errors))
        raise ValidationError(f"Invalid sweet: {describe(errors)}", errors)
    return Sweet(**{f: candidate[f] for f in SWEET_FIELDS})
