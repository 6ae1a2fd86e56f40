# src/meep/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..messages.message_list import MessageList
from ..tasks.task_list import TaskList
from .ports import TaskStorage


@dataclass
class AppState:
    """
    Everything a command may read or mutate.

    Owned by one shell (console loop or GUI handler). Nothing here is internally
    synchronized; a host that serves several callers at once should pass a lock,
    which get_response() holds around parse + execute.
    """

    settings: object
    storage: TaskStorage

    tasks: TaskList = field(default_factory=TaskList)
    messages: MessageList = field(default_factory=MessageList)

    lock: threading.RLock | None = None
