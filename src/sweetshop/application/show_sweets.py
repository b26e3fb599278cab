"""Application service: List / Show Sweet use cases (queries)."""

from __future__ import annotations

from sweetshop.application.dto import SweetDTO
from sweetshop.domain.exceptions import EntityNotFoundError
from sweetshop.domain.repository.sweet_repository import SweetRepository


class ListSweetsHandler:

    def __init__(self, sweet_repo: SweetRepository) -> None:
        self._sweet_repo = sweet_repo

    def handle(self) -> list[SweetDTO]:
        return [SweetDTO.from_domain(s) for s in self._sweet_repo.get_all()]


class ShowSweetHandler:

    def __init__(self, sweet_repo: SweetRepository) -> None:
        self._sweet_repo = sweet_repo

    def handle(self, sweet_id: int) -> SweetDTO:
        sweet = self._sweet_repo.get_by_id(sweet_id)
        if sweet is None:
            raise EntityNotFoundError(f"Sweet #{sweet_id} not found")
        return SweetDTO.from_domain(sweet)
