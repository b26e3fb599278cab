"""Field rules shared by the entity, the store and the query engines.

Every check is a pure predicate.  ``collect_violations`` runs all of them
against a candidate record and reports each failing field, so a caller
can show the user everything that is wrong in one go.

Whole numbers may arrive as integral floats (``20.0`` from JSON); they
pass the integer rules and ``normalize_field`` turns them into ``int``.
"""

from __future__ import annotations

import math
from typing import Any

from sweetshop.domain.exceptions import InvalidArgumentError


def is_whole_number(value: Any) -> bool:
    # bool is an int subclass; True must not pass as ID 1
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value) and value.is_integer()


def is_positive_int(value: Any) -> bool:
    return is_whole_number(value) and value > 0


def is_non_negative_int(value: Any) -> bool:
    return is_whole_number(value) and value >= 0


def is_non_negative_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def is_non_blank(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


_FIELD_RULES = {
    "id": (is_positive_int, "id must be a positive integer, got {!r}"),
    "name": (is_non_blank, "name cannot be empty"),
    "category": (is_non_blank, "category cannot be empty"),
    "price": (is_non_negative_number, "price must be a non-negative number, got {!r}"),
    "quantity": (is_non_negative_int, "quantity must be a non-negative integer, got {!r}"),
}


def field_violation(field: str, value: Any) -> str | None:
    """Return the message for *field* if *value* breaks its rule."""
    check, message = _FIELD_RULES[field]
    return None if check(value) else message.format(value)


def normalize_field(field: str, value: Any) -> Any:
    """Canonical stored form of an already valid field value."""
    if field in ("id", "quantity"):
        return int(value)
    if field in ("name", "category"):
        return value.strip()
    return value


def collect_violations(
    id: Any,
    name: Any,
    category: Any,
    price: Any,
    quantity: Any,
) -> dict[str, str]:
    """Return ``{field: message}`` for every rule the candidate breaks."""
    values = {"id": id, "name": name, "category": category, "price": price, "quantity": quantity}
    errors: dict[str, str] = {}
    for field, value in values.items():
        message = field_violation(field, value)
        if message is not None:
            errors[field] = message
    return errors


def check_id(sweet_id: Any) -> int:
    """Return *sweet_id* as an int, or raise InvalidArgumentError."""
    if not is_positive_int(sweet_id):
        raise InvalidArgumentError(
            f"Invalid sweet ID: must be a positive integer, got {sweet_id!r}",
            {"id": "must be a positive integer"},
        )
    return int(sweet_id)


def describe(errors: dict[str, str]) -> str:
    """Join per-field messages into one human-readable sentence."""
    return "; ".join(errors.values())
