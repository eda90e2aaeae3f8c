# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from storage import KeyValueStore, Storage
from todolist import TodoList


class CountingStorage(Storage):
    """Storage that records how many times save() ran."""

    def __init__(self, store: KeyValueStore) -> None:
        super().__init__(store)
        self.saves = 0

    def save(self, tasks) -> None:
        self.saves += 1
        super().save(tasks)


@pytest.fixture()
def store_file(tmp_path: Path) -> Path:
    return tmp_path / "store.json"


@pytest.fixture()
def storage(store_file: Path) -> CountingStorage:
    return CountingStorage(KeyValueStore(store_file))


@pytest.fixture()
def todos(storage: CountingStorage) -> TodoList:
    return TodoList.load(storage)
