"""Abstract repository for the Sweet aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The store is the sole owner of its sweets: callers
always receive copies, and changes only land through ``update()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from sweetshop.domain.model.sweet import Sweet


class SweetRepository(ABC):

    @abstractmethod
    def create(self, sweet: Sweet) -> Sweet:
        """Store a new sweet and return the stored snapshot.

        Raises DuplicateIdError if the ID is taken.
        """

    @abstractmethod
    def get_all(self) -> list[Sweet]:
        """Return every sweet in insertion order."""

    @abstractmethod
    def get_by_id(self, sweet_id: int) -> Sweet | None:
        """Return a sweet by its ID, or None if not found."""

    @abstractmethod
    def exists(self, sweet_id: int) -> bool:
        """Return True if a sweet with this ID is stored."""

    @abstractmethod
    def delete(self, sweet_id: int) -> bool:
        """Remove a sweet; return False if there was nothing to remove."""

    @abstractmethod
    def update(self, sweet: Sweet) -> bool:
        """Replace the stored sweet with the same ID; False if none matched."""

    @abstractmethod
    def locked(self) -> AbstractContextManager[None]:
        """Hold the store's critical section for a read-check-write sequence."""
