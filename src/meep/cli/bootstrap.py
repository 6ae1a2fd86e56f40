# src/meep/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the flat-file store and empty task/message lists into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    # The data directory is created lazily by TaskFileStore.save().
    state = AppState(
        settings=settings,
        storage=TaskFileStore(settings.tasks_file_path),
    )
    logger.debug("State created (tasks_file=%s)", settings.tasks_file_path)
    return state
