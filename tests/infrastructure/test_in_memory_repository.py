"""Unit tests for the in-memory sweet store."""

import pytest

from sweetshop.domain.exceptions import (
    DuplicateIdError,
    InvalidArgumentError,
    InvalidEntityError,
)
from sweetshop.domain.model.sweet import Sweet
from sweetshop.infrastructure.persistence.in_memory_sweet_repository import (
    InMemorySweetRepository,
)
from tests.fakes import sample_sweets


def _sweet(sweet_id: int, name: str = "Toffee") -> Sweet:
    return Sweet(id=sweet_id, name=name, category="candy", price=1.0, quantity=10)


class TestCreate:

    def test_create_returns_stored_sweet(self):
        repo = InMemorySweetRepository()
        stored = repo.create(_sweet(1))
        assert stored == _sweet(1)
        assert repo.get_by_id(1) == stored

    def test_duplicate_id_rejected_and_store_unchanged(self):
        repo = InMemorySweetRepository(sample_sweets())
        before = repo.get_all()
        with pytest.raises(DuplicateIdError, match="ID 1 already exists"):
            repo.create(_sweet(1, name="Impostor"))
        assert repo.get_all() == before
        assert len(repo) == 5

    def test_none_rejected(self):
        with pytest.raises(InvalidEntityError, match="cannot be None"):
            InMemorySweetRepository().create(None)

    def test_wrong_type_rejected(self):
        with pytest.raises(InvalidEntityError, match="Expected a Sweet"):
            InMemorySweetRepository().create({"id": 1})

    def test_caller_copy_is_not_the_stored_entity(self):
        repo = InMemorySweetRepository()
        original = _sweet(1)
        repo.create(original)
        original.quantity = 0
        assert repo.get_by_id(1).quantity == 10


class TestRead:

    def test_get_all_empty(self):
        assert InMemorySweetRepository().get_all() == []

    def test_get_all_keeps_insertion_order(self):
        repo = InMemorySweetRepository()
        for sweet_id in (3, 1, 2):
            repo.create(_sweet(sweet_id))
        assert [s.id for s in repo.get_all()] == [3, 1, 2]

    def test_get_all_is_repeatable(self):
        repo = InMemorySweetRepository(sample_sweets())
        assert repo.get_all() == repo.get_all()

    def test_get_by_id_missing_returns_none(self):
        assert InMemorySweetRepository(sample_sweets()).get_by_id(99) is None

    @pytest.mark.parametrize("bad_id", [0, -1, 1.5, "1", None])
    def test_get_by_id_invalid_id_rejected(self, bad_id):
        with pytest.raises(InvalidArgumentError, match="positive integer"):
            InMemorySweetRepository().get_by_id(bad_id)

    def test_get_by_id_accepts_whole_float(self):
        repo = InMemorySweetRepository(sample_sweets())
        assert repo.get_by_id(1.0).name == "Dark Chocolate"

    def test_exists(self):
        repo = InMemorySweetRepository(sample_sweets())
        assert repo.exists(1)
        assert repo.exists(1.0)
        assert not repo.exists(99)
        assert not repo.exists("1")


class TestDelete:

    def test_delete_existing(self):
        repo = InMemorySweetRepository(sample_sweets())
        assert repo.delete(1) is True
        assert repo.get_by_id(1) is None
        assert len(repo) == 4

    def test_delete_missing_returns_false(self):
        assert InMemorySweetRepository(sample_sweets()).delete(99) is False

    def test_delete_invalid_id_rejected(self):
        with pytest.raises(InvalidArgumentError):
            InMemorySweetRepository().delete(-1)


class TestUpdate:

    def test_update_replaces_and_keeps_position(self):
        repo = InMemorySweetRepository(sample_sweets())
        sweet = repo.get_by_id(2)
        sweet.quantity = 1
        assert repo.update(sweet) is True
        assert repo.get_by_id(2).quantity == 1
        assert [s.id for s in repo.get_all()] == [1, 2, 3, 4, 5]

    def test_update_missing_returns_false(self):
        repo = InMemorySweetRepository()
        assert repo.update(_sweet(1)) is False
        assert repo.get_all() == []


class TestLocked:

    def test_lock_is_reentrant(self):
        repo = InMemorySweetRepository(sample_sweets())
        with repo.locked():
            with repo.locked():
                assert repo.get_by_id(1) is not None
