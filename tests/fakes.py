"""Test helpers: sample catalogue and a misbehaving store.

``BrokenUpdateSweetRepository`` behaves like the in-memory store but
fails every write-back, which lets tests check that a transition leaves
nothing half-applied.
"""

from __future__ import annotations

from sweetshop.domain.model.sweet import Sweet
from sweetshop.infrastructure.persistence.in_memory_sweet_repository import (
    InMemorySweetRepository,
)


def sample_sweets() -> list[Sweet]:
    return [
        Sweet(id=1, name="Dark Chocolate", category="chocolate", price=4.99, quantity=20),
        Sweet(id=2, name="Gummy Bears", category="gummy", price=2.49, quantity=50),
        Sweet(id=3, name="Lemon Tart", category="pastry", price=6.50, quantity=8),
        Sweet(id=4, name="Milk Chocolate", category="chocolate", price=3.99, quantity=0),
        Sweet(id=5, name="Chocolate Fudge", category="fudge", price=12.00, quantity=5),
    ]


class BrokenUpdateSweetRepository(InMemorySweetRepository):

    def update(self, sweet: Sweet) -> bool:
        raise RuntimeError("write-back failed")
