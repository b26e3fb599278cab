"""Application service: Delete Sweet use case."""

from __future__ import annotations

from sweetshop.domain.exceptions import EntityNotFoundError
from sweetshop.domain.repository.sweet_repository import SweetRepository


class DeleteSweetHandler:

    def __init__(self, sweet_repo: SweetRepository) -> None:
        self._sweet_repo = sweet_repo

    def handle(self, sweet_id: int) -> None:
        # The store reports a missing ID as False; the boundary needs it
        # as a not-found outcome.
        if not self._sweet_repo.delete(sweet_id):
            raise EntityNotFoundError(f"Sweet #{sweet_id} not found")
