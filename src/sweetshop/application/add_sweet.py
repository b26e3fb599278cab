"""Application service: Add Sweet use case."""

from __future__ import annotations

from typing import Any

from sweetshop.application.dto import SweetDTO
from sweetshop.domain.model.sweet import validate_sweet
from sweetshop.domain.repository.sweet_repository import SweetRepository


class AddSweetHandler:

    def __init__(self, sweet_repo: SweetRepository) -> None:
        self._sweet_repo = sweet_repo

    def handle(
        self,
        name: Any,
        category: Any,
        price: Any,
        quantity: Any,
        sweet_id: Any = None,
    ) -> SweetDTO:
        """Add a new sweet to the catalogue.

        When no ID is given, the next one after the highest stored ID is
        assigned.  Raises ValidationError listing every bad field, or
        DuplicateIdError if an explicit ID is already taken.
        """
        with self._sweet_repo.locked():
            if sweet_id is None:
                sweet_id = self._next_id()
            sweet = validate_sweet({
                "id": sweet_id,
                "name": name,
                "category": category,
                "price": price,
                "quantity": quantity,
            })
            stored = self._sweet_repo.create(sweet)
        return SweetDTO.from_domain(stored)

    def _next_id(self) -> int:
        existing = self._sweet_repo.get_all()
        return max((s.id for s in existing), default=0) + 1
