# src/meep/core/indexed_list.py

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class IndexedList(Generic[T]):
    """
    Insertion-ordered container shared by TaskList and MessageList.

    Indices are 0-based internally; callers that show numbers to the user add 1.
    Negative indices are rejected (no Python-style wraparound).

    Not thread-safe: a concurrent host must hold its own lock around every call
    (see AppState.lock).
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            raise IndexError(f"index {index} out of range (size={len(self._items)})")

    def append(self, item: T) -> None:
        self._items.append(item)

    def remove_at(self, index: int) -> T:
        self._check_index(index)
        return self._items.pop(index)

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def clear(self) -> None:
        self._items.clear()

    def count(self) -> int:
        return len(self._items)

    def for_each(self, visitor: Callable[[T], None]) -> None:
        for item in list(self._items):
            visitor(item)

    def for_each_indexed(self, visitor: Callable[[T, int], None]) -> None:
        for i, item in enumerate(list(self._items)):
            visitor(item, i)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> T:
        return self.get(index)
