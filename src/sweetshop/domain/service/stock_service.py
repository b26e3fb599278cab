"""Domain service: stock transitions (purchase and restock).

Each transition is a guard-then-mutate sequence run inside the store's
critical section:
  1. validate the ID and the amount, before the store is touched
  2. load a copy of the sweet and apply the transition to it
  3. write the copy back through ``update()``
If any step raises, the stored sweet is left exactly as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from sweetshop.domain.exceptions import DomainException, EntityNotFoundError
from sweetshop.domain.model.sweet import Sweet, check_amount
from sweetshop.domain.model.validation import check_id
from sweetshop.domain.repository.sweet_repository import SweetRepository

logger = logging.getLogger(__name__)


class StockService:

    def __init__(self, sweet_repo: SweetRepository) -> None:
        self._sweet_repo = sweet_repo

    def purchase(self, sweet_id: int, amount: int) -> Sweet:
        """Decrease stock by *amount*; fails if fewer units are available."""
        sweet_id = check_id(sweet_id)
        amount = check_amount(amount, "Purchase")
        return self._transition(sweet_id, lambda sweet: sweet.purchase(amount), "purchase")

    def restock(self, sweet_id: int, amount: int) -> Sweet:
        """Increase stock by *amount*, whatever the current level."""
        sweet_id = check_id(sweet_id)
        amount = check_amount(amount, "Restock")
        return self._transition(sweet_id, lambda sweet: sweet.restock(amount), "restock")

    def _transition(
        self,
        sweet_id: int,
        apply: Callable[[Sweet], None],
        action: str,
    ) -> Sweet:
        with self._sweet_repo.locked():
            sweet = self._sweet_repo.get_by_id(sweet_id)
            if sweet is None:
                raise EntityNotFoundError(f"Sweet #{sweet_id} not found")
            before = sweet.quantity
            try:
                apply(sweet)
            except DomainException as exc:
                logger.warning("Rejected %s of sweet #%s: %s", action, sweet_id, exc)
                raise
            if not self._sweet_repo.update(sweet):
                raise EntityNotFoundError(f"Sweet #{sweet_id} not found")
        logger.info(
            "%s sweet #%s: quantity %s -> %s",
            action.capitalize(), sweet_id, before, sweet.quantity,
        )
        return sweet
