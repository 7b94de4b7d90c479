"""Shared fixtures for board tests."""

from collections.abc import Sequence

import pytest

from simplekanban.errors import PersistenceError
from simplekanban.models import Item
from simplekanban.services import BoardStore


class MemoryRepository:
    """In-memory repository that records saves and can simulate failures."""

    def __init__(self, items: Sequence[Item] | None = None) -> None:
        # None means nothing was ever stored (first launch)
        self.stored: list[Item] | None = (
            [item.model_copy() for item in items] if items is not None else None
        )
        self.save_count = 0
        self.fail_load = False
        self.fail_save = False

    def exists(self) -> bool:
        return self.stored is not None

    def load(self) -> list[Item]:
        if self.fail_load:
            raise PersistenceError("simulated read failure")
        return [item.model_copy() for item in self.stored or []]

    def save(self, items: Sequence[Item]) -> None:
        if self.fail_save:
            raise PersistenceError("simulated write failure")
        self.save_count += 1
        self.stored = [item.model_copy() for item in items]


@pytest.fixture
def memory_repo() -> MemoryRepository:
    """Repository holding an existing, empty board."""
    return MemoryRepository(items=[])


@pytest.fixture
def store(memory_repo: MemoryRepository) -> BoardStore:
    """Loaded store over an empty in-memory board."""
    board_store = BoardStore(memory_repo)
    board_store.load()
    return board_store
