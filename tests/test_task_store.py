# tests/test_task_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from meep.tasks.task_list import TaskList
from meep.tasks.task_models import Deadline, Event, Todo
from meep.tasks.task_store import StorageError, TaskFileStore


def _three_tasks() -> TaskList:
    tasks = TaskList()
    tasks.append(Todo("a"))
    tasks.append(Deadline("b", "2025-08-30", done=True))
    tasks.append(Event("c", "2025-08-28", "2025-08-30"))
    return tasks


def test_save_then_load_round_trips(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "meep.txt")
    tasks = _three_tasks()

    assert store.save(tasks) == 3
    assert (tmp_path / "meep.txt").read_text("utf-8").splitlines() == [
        "|T|0|a|",
        "|D|1|b|2025-08-30|",
        "|E|0|c|2025-08-28-2025-08-30|",
    ]

    loaded = TaskList()
    report = store.load(loaded)
    assert report.ok
    assert report.loaded == 3
    assert loaded.count() == 3
    assert [t.display() for t in loaded] == [t.display() for t in tasks]


def test_save_creates_missing_directories(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b" / "c" / "meep.txt"
    store = TaskFileStore(nested)
    tasks = TaskList()
    tasks.append(Todo("hello"))

    store.save(tasks)
    assert nested.exists()


def test_save_overwrites_previous_content(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "meep.txt")
    store.save(_three_tasks())

    store.save(TaskList())
    assert (tmp_path / "meep.txt").read_text("utf-8") == ""


def test_save_to_unwritable_path_raises_storage_error(tmp_path: Path) -> None:
    # A directory cannot be opened for writing as a file.
    store = TaskFileStore(tmp_path)
    tasks = TaskList()
    tasks.append(Todo("a"))

    with pytest.raises(StorageError):
        store.save(tasks)


def test_load_missing_file_reports_and_keeps_list(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "nope.txt")
    tasks = TaskList()
    tasks.append(Todo("keep me"))

    report = store.load(tasks)
    assert report.missing
    assert not report.ok
    assert tasks.count() == 1


def test_load_clears_existing_tasks_first(tmp_path: Path) -> None:
    path = tmp_path / "meep.txt"
    path.write_text("|T|0|from disk|\n", "utf-8")
    tasks = TaskList()
    tasks.append(Todo("in memory"))

    TaskFileStore(path).load(tasks)
    assert [t.description for t in tasks] == ["from disk"]


def test_load_skips_and_reports_malformed_lines(tmp_path: Path) -> None:
    path = tmp_path / "meep.txt"
    path.write_text(
        "\n".join(
            [
                "|T|0|good|",
                "|X|0|bad|",
                "",
                "|D|0|submit|2025-12-31|",
                "|E|0|trip|2025-06-10-2025-06-01|",
            ]
        ),
        "utf-8",
    )
    tasks = TaskList()

    report = TaskFileStore(path).load(tasks)
    assert report.loaded == 2
    assert [s.line_no for s in report.skipped] == [2, 5]
    assert "Unknown task type: X" in report.skipped[0].reason
    assert not report.ok
    assert [t.description for t in tasks] == ["good", "submit"]


@pytest.mark.parametrize("separator", ["\u2028", "\u2029", "\x0c", "\x0b", "\x1e", "\x85"])
def test_description_with_unicode_line_separator_round_trips(
    tmp_path: Path, separator: str
) -> None:
    store = TaskFileStore(tmp_path / "meep.txt")
    tasks = TaskList()
    tasks.append(Todo(f"alpha{separator}beta"))
    tasks.append(Todo("gamma"))
    store.save(tasks)

    loaded = TaskList()
    report = store.load(loaded)

    assert report.ok
    assert report.loaded == 2
    assert loaded.get(0).description == f"alpha{separator}beta"
    assert loaded.get(1).description == "gamma"


def test_load_accepts_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "meep.txt"
    path.write_bytes(b"|T|0|a|\r\n|D|1|b|2025-08-30|\r\n")

    tasks = TaskList()
    report = TaskFileStore(path).load(tasks)

    assert report.ok
    assert [str(t) for t in tasks] == ["[T][ ] a", "[D][X] b (by: Aug 30 2025)"]
