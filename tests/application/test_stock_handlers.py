"""Integration tests for the Purchase / Restock use cases."""

import pytest

from sweetshop.application.adjust_stock import PurchaseSweetHandler, RestockSweetHandler
from sweetshop.domain.exceptions import EntityNotFoundError, InsufficientStockError
from sweetshop.infrastructure.persistence.in_memory_sweet_repository import (
    InMemorySweetRepository,
)
from tests.fakes import sample_sweets


def _setup() -> tuple[PurchaseSweetHandler, RestockSweetHandler, InMemorySweetRepository]:
    repo = InMemorySweetRepository(sample_sweets())
    return PurchaseSweetHandler(repo), RestockSweetHandler(repo), repo


class TestPurchaseSweet:

    def test_purchase_returns_updated_dto(self):
        purchase, _, _ = _setup()
        dto = purchase.handle(1, 5)
        assert dto.quantity == 15
        assert dto.in_stock

    def test_insufficient_stock(self):
        purchase, _, repo = _setup()
        with pytest.raises(InsufficientStockError):
            purchase.handle(3, 9)
        assert repo.get_by_id(3).quantity == 8


class TestRestockSweet:

    def test_restock_zero_stock_item(self):
        _, restock, _ = _setup()
        dto = restock.handle(4, 15)
        assert dto.quantity == 15

    def test_restock_unknown(self):
        _, restock, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            restock.handle(99, 1)
