"""In-memory implementation of SweetRepository.

Sweets are kept in a dict keyed by ID; dicts preserve insertion order,
so listing still reflects creation order.  A single reentrant lock
guards the whole store.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace

from sweetshop.domain.exceptions import (
    DuplicateIdError,
    InvalidEntityError,
)
from sweetshop.domain.model.sweet import Sweet
from sweetshop.domain.model.validation import check_id, is_positive_int
from sweetshop.domain.repository.sweet_repository import SweetRepository

logger = logging.getLogger(__name__)


class InMemorySweetRepository(SweetRepository):

    def __init__(self, sweets: list[Sweet] | None = None) -> None:
        self._store: dict[int, Sweet] = {}
        self._lock = threading.RLock()
        for sweet in sweets or []:
            self.create(sweet)

    # --- SweetRepository interface --------------------------------------------

    def create(self, sweet: Sweet) -> Sweet:
        if sweet is None:
            raise InvalidEntityError("Sweet cannot be None")
        if not isinstance(sweet, Sweet):
            raise InvalidEntityError(
                f"Expected a Sweet, got {type(sweet).__name__}"
            )
        with self._lock:
            if self.exists(sweet.id):
                logger.warning("Rejected duplicate sweet ID %s", sweet.id)
                raise DuplicateIdError(f"Sweet with ID {sweet.id} already exists")
            self._store[sweet.id] = replace(sweet)
            logger.info("Created sweet #%s '%s'", sweet.id, sweet.name)
            return replace(sweet)

    def get_all(self) -> list[Sweet]:
        with self._lock:
            return [replace(sweet) for sweet in self._store.values()]

    def get_by_id(self, sweet_id: int) -> Sweet | None:
        sweet_id = check_id(sweet_id)
        with self._lock:
            sweet = self._store.get(sweet_id)
            return replace(sweet) if sweet is not None else None

    def exists(self, sweet_id: int) -> bool:
        if not is_positive_int(sweet_id):
            return False
        with self._lock:
            return int(sweet_id) in self._store

    def delete(self, sweet_id: int) -> bool:
        sweet_id = check_id(sweet_id)
        with self._lock:
            if self._store.pop(sweet_id, None) is None:
                return False
            logger.info("Deleted sweet #%s", sweet_id)
            return True

    def update(self, sweet: Sweet) -> bool:
        if not isinstance(sweet, Sweet):
            raise InvalidEntityError(
                f"Expected a Sweet, got {type(sweet).__name__}"
            )
        with self._lock:
            if sweet.id not in self._store:
                return False
            # assigning an existing key keeps its position
            self._store[sweet.id] = replace(sweet)
            logger.debug("Updated sweet #%s (quantity=%s)", sweet.id, sweet.quantity)
            return True

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
