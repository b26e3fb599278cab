"""Application service: Purchase / Restock use cases.

Thin wrappers over the StockService domain service; they exist so the
CLI deals only in DTOs.
"""

from __future__ import annotations

from sweetshop.application.dto import SweetDTO
from sweetshop.domain.repository.sweet_repository import SweetRepository
from sweetshop.domain.service.stock_service import StockService


class PurchaseSweetHandler:

    def __init__(self, sweet_repo: SweetRepository) -> None:
        self._sweet_repo = sweet_repo

    def handle(self, sweet_id: int, quantity: int) -> SweetDTO:
        svc = StockService(self._sweet_repo)
        return SweetDTO.from_domain(svc.purchase(sweet_id, quantity))


class RestockSweetHandler:

    def __init__(self, sweet_repo: SweetRepository) -> None:
        self._sweet_repo = sweet_repo

    def handle(self, sweet_id: int, quantity: int) -> SweetDTO:
        svc = StockService(self._sweet_repo)
        return SweetDTO.from_domain(svc.restock(sweet_id, quantity))
