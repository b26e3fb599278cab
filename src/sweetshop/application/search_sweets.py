"""Application service: Search Sweets use case (query)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sweetshop.application.dto import SweetDTO
from sweetshop.domain.model.search_criteria import SearchCriteria
from sweetshop.domain.repository.sweet_repository import SweetRepository
from sweetshop.domain.service.search_service import SweetSearchService


class SearchSweetsHandler:

    def __init__(self, sweet_repo: SweetRepository) -> None:
        self._sweet_repo = sweet_repo

    def handle(self, query: Mapping[str, Any]) -> list[SweetDTO]:
        """Search with raw query parameters.

        Keys may be ``min_price`` or ``minPrice`` style; None values and
        unknown keys are ignored.
        """
        criteria = SearchCriteria.from_mapping(query)
        svc = SweetSearchService(self._sweet_repo)
        return [SweetDTO.from_domain(s) for s in svc.search(criteria)]
