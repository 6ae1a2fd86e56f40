# src/meep/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .task_list import TaskList
from .task_models import TaskError, from_record, to_record

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """The task file could not be read or written."""


@dataclass(slots=True)
class SkippedLine:
    line_no: int
    reason: str


@dataclass(slots=True)
class LoadReport:
    """
    Outcome of TaskFileStore.load().

    missing=True means the file did not exist and the target list was left untouched.
    """

    path: Path
    missing: bool = False
    loaded: int = 0
    skipped: list[SkippedLine] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing and not self.skipped


class TaskFileStore:
    """
    Flat-file task store: one pipe-delimited record per line.

    - save() rewrites the whole file (no temp-file + rename, so a crash mid-write
      can leave a truncated file)
    - load() clears the target list, then adds every record that parses;
      malformed lines are skipped and reported in the LoadReport
    """

    def __init__(self, path: str | Path = "data/meep.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, tasks: TaskList) -> int:
        """Write all tasks in list order. Returns the number of records written."""
        records = [to_record(task) for task in tasks]
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8", newline="\n") as f:
                for record in records:
                    f.write(record + "\n")
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            raise StorageError(f"Error saving tasks to {self._path}") from e

        logger.info("Saved %d tasks to %s", len(records), self._path)
        return len(records)

    def load(self, tasks: TaskList) -> LoadReport:
        report = LoadReport(path=self._path)
        if not self._path.exists():
            logger.info("Task file %s not found; nothing loaded.", self._path)
            report.missing = True
            return report

        try:
            # Records are separated by "\n" only; str.splitlines() would also break on
            # characters such as \x0c or \u2028 that a description may contain.
            with self._path.open(encoding="utf-8", newline="") as f:
                lines = [line.rstrip("\r") for line in f.read().split("\n")]
        except (OSError, UnicodeDecodeError) as e:
            logger.exception("Failed to read tasks from %s", self._path)
            raise StorageError(f"Error loading tasks from {self._path}") from e

        tasks.clear()
        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                task = from_record(line)
            except TaskError as e:
                logger.warning("Skipping malformed record %s:%d: %s", self._path, line_no, e)
                report.skipped.append(SkippedLine(line_no=line_no, reason=str(e)))
                continue
            tasks.append(task)
            report.loaded += 1

        logger.info(
            "Loaded %d tasks from %s (skipped=%d)", report.loaded, self._path, len(report.skipped)
        )
        return report
