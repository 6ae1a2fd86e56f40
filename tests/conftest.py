# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from meep.core.state import AppState
from meep.tasks.task_store import TaskFileStore

from .fakes import RecordingEmitter


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console shell.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="meep-test",
        data_dir=tmp_path / "data",
        tasks_file_path=tmp_path / "data" / "meep.txt",
        autoload=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState with a real flat-file store under tmp_path."""
    return AppState(
        settings=settings,
        storage=TaskFileStore(settings.tasks_file_path),
    )


@pytest.fixture()
def emitter() -> RecordingEmitter:
    return RecordingEmitter()
