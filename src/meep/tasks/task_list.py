# src/meep/tasks/task_list.py

from __future__ import annotations

from collections.abc import Callable, Iterator

from ..core.indexed_list import IndexedList
from .task_models import Task


class TaskList(IndexedList[Task]):
    """Ordered tasks; insertion order is the display and numbering order."""

    def iter_matching(self, predicate: Callable[[Task], bool]) -> Iterator[tuple[int, Task]]:
        """Yield (0-based index, task) for tasks accepted by `predicate`, in list order."""
        for i, task in enumerate(self):
            if predicate(task):
                yield i, task

    def find(self, needle: str) -> list[tuple[int, Task]]:
        return list(self.iter_matching(lambda t: t.description_contains(needle)))

    def due_on(self, query: str) -> list[tuple[int, Task]]:
        return list(self.iter_matching(lambda t: t.is_due(query)))
