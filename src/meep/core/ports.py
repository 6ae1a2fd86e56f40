# src/meep/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands depend on these Protocols rather than on concrete classes, which keeps
the storage backend swappable and makes failing fakes trivial in tests.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_list import TaskList
    from ..tasks.task_store import LoadReport

CommandEmitter = Callable[[str], None]
# Receives text the interactive parser reports directly (e.g. "Invalid task number.").


class TaskStorage(Protocol):
    """Where `save` / `load` put the task list."""

    def save(self, tasks: TaskList) -> int: ...
    def load(self, tasks: TaskList) -> LoadReport: ...


class Command(Protocol):
    """A parsed, validated user request. `category` is a stable label for front-ends."""

    @property
    def category(self) -> str: ...

    def execute(self) -> str: ...
