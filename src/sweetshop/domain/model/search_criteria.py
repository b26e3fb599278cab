"""SearchCriteria value object — an ephemeral, validated query.

Criteria are never persisted.  ``validate()`` enforces the query rules
and ``matches()`` evaluates all specified predicates with AND semantics.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sweetshop.domain.exceptions import (
    EmptyCriteriaError,
    InvalidArgumentError,
    InvalidRangeError,
)
from sweetshop.domain.model.sweet import Sweet
from sweetshop.domain.model.validation import is_non_blank, is_non_negative_number

# Raw mappings may use either spelling (query strings use camelCase)
_KEY_ALIASES = {
    "name": "name",
    "category": "category",
    "min_price": "min_price",
    "minPrice": "min_price",
    "max_price": "max_price",
    "maxPrice": "max_price",
}


@dataclass(frozen=True)
class SearchCriteria:

    name: str | None = None
    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None

    @staticmethod
    def from_mapping(raw: Mapping[str, Any]) -> SearchCriteria:
        """Build criteria from raw key/values, ignoring unknown keys."""
        if not isinstance(raw, Mapping):
            raise InvalidArgumentError(
                f"Search criteria must be a mapping, got {type(raw).__name__}"
            )
        kwargs = {
            _KEY_ALIASES[key]: value
            for key, value in raw.items()
            if key in _KEY_ALIASES and value is not None
        }
        return SearchCriteria(**kwargs)

    # --- Validation -----------------------------------------------------------

    def validate(self) -> None:
        """Raise if the criteria are malformed or specify nothing.

        A blank string counts as "not specified" for the at-least-one
        rule; next to a real criterion it is rejected outright.
        """
        errors: dict[str, str] = {}
        for field_name in ("name", "category"):
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, str):
                errors[field_name] = f"{field_name} must be a string"
        for field_name in ("min_price", "max_price"):
            value = getattr(self, field_name)
            if value is not None and not is_non_negative_number(value):
                errors[field_name] = f"{field_name} must be a non-negative number"
        if errors:
            raise InvalidArgumentError(
                f"Invalid search criteria: {'; '.join(errors.values())}", errors
            )

        if not self.is_specified:
            raise EmptyCriteriaError(
                "At least one valid search criterion is required",
                {"criteria": "name, category, min_price or max_price is required"},
            )

        for field_name in ("name", "category"):
            value = getattr(self, field_name)
            if value is not None and not is_non_blank(value):
                raise InvalidArgumentError(
                    f"Invalid search criteria: {field_name} cannot be empty",
                    {field_name: "cannot be empty"},
                )

        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise InvalidRangeError(
                f"min_price ({self.min_price}) cannot be greater than "
                f"max_price ({self.max_price})",
                {"max_price": "must be greater than or equal to min_price"},
            )

    @property
    def is_specified(self) -> bool:
        return (
            is_non_blank(self.name)
            or is_non_blank(self.category)
            or self.min_price is not None
            or self.max_price is not None
        )

    # --- Matching -------------------------------------------------------------

    def matches(self, sweet: Sweet) -> bool:
        """True when *sweet* satisfies every specified predicate."""
        name = _normalize(self.name)
        if name and name not in sweet.name.lower():
            return False
        category = _normalize(self.category)
        if category and category not in sweet.category.lower():
            return False
        low = -math.inf if self.min_price is None else self.min_price
        high = math.inf if self.max_price is None else self.max_price
        return low <= sweet.price <= high


def _normalize(text: str | None) -> str:
    return text.strip().lower() if text else ""
