"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from sweetshop.domain.model.sweet import Sweet


@dataclass(frozen=True)
class SweetDTO:
    """Output: a single sweet as displayed to the user."""

    id: int
    name: str
    category: str
    price: str  # formatted, e.g. "$4.99"
    quantity: int

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    @staticmethod
    def from_domain(sweet: Sweet) -> SweetDTO:
        return SweetDTO(
            id=sweet.id,
            name=sweet.name,
            category=sweet.category,
            price=f"${sweet.price:.2f}",
            quantity=sweet.quantity,
        )
