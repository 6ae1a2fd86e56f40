# src/meep/tasks/task_models.py

"""
Task variants (Todo / Deadline / Event) and their text formats.

Three formats meet here:
- user input:     "deadline submit report /by 2025-08-30"
- display:        "[D][ ] submit report (by: Aug 30 2025)"
- saved record:   "|D|0|submit report|2025-08-30|"

Dates are kept as the raw input strings (already validated at construction),
so a record always writes back exactly what the user typed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import ClassVar

INPUT_DATE_PATTERN = "yyyy-MM-dd"
OUTPUT_DATE_PATTERN = "MMM dd yyyy"

_INPUT_DATE_FORMAT = "%Y-%m-%d"
_OUTPUT_DATE_FORMAT = "%b %d %Y"
_INPUT_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

# Characters that would break the line-oriented, pipe-delimited record format.
_FORBIDDEN_IN_DESCRIPTION = ("|", "\n", "\r")


class TaskError(ValueError):
    """A task could not be built; the message is meant for the user."""


class RecordFormatError(TaskError):
    """A saved record line could not be turned back into a task."""


class TaskType(StrEnum):
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


# ---- dates ----


def parse_date(text: str | None) -> date | None:
    """Parse a yyyy-MM-dd string. Returns None instead of raising."""
    if text is None:
        return None
    candidate = text.strip()
    if not _INPUT_DATE_RE.fullmatch(candidate):
        return None
    try:
        return datetime.strptime(candidate, _INPUT_DATE_FORMAT).date()
    except ValueError:
        return None


def is_valid_date(text: str | None) -> bool:
    return parse_date(text) is not None


def format_date(text: str) -> str:
    """Render a stored date for display, or return it unchanged if it does not parse."""
    parsed = parse_date(text)
    if parsed is None:
        return text
    return parsed.strftime(_OUTPUT_DATE_FORMAT)


# ---- validation helpers ----


def _require_description(description: str | None) -> str:
    if description is None or not description.strip():
        raise TaskError("Task Description cannot be empty")
    if any(ch in description for ch in _FORBIDDEN_IN_DESCRIPTION):
        raise TaskError("Task Description cannot contain '|' or line breaks")
    return description.strip()


def _require_date(value: str | None, missing_message: str) -> str:
    if value is None or not value.strip():
        raise TaskError(missing_message)
    value = value.strip()
    if parse_date(value) is None:
        raise TaskError(f"Invalid date format. Please use: {INPUT_DATE_PATTERN}")
    return value


def _query_date(query: str | date) -> date | None:
    if isinstance(query, datetime):
        return query.date()
    if isinstance(query, date):
        return query
    return parse_date(query)


# ---- variants ----


class _TaskBehaviour:
    """Behaviour shared by every variant. Variants are plain dataclasses."""

    __slots__ = ()

    kind: ClassVar[TaskType]
    description: str
    done: bool

    def mark_done(self) -> None:
        self.done = True

    def mark_not_done(self) -> None:
        self.done = False

    def description_contains(self, needle: str) -> bool:
        """Case-sensitive substring test used by `find`."""
        if needle is None:
            raise TypeError("needle must not be None")
        return needle in self.description

    def _status_line(self) -> str:
        mark = "X" if self.done else " "
        return f"[{self.kind}][{mark}] {self.description}"

    def __str__(self) -> str:
        return self.display()  # type: ignore[attr-defined]


@dataclass(slots=True)
class Todo(_TaskBehaviour):
    kind: ClassVar[TaskType] = TaskType.TODO

    description: str
    done: bool = False

    def __post_init__(self) -> None:
        self.description = _require_description(self.description)

    def is_due(self, query: str | date) -> bool:
        return False

    def extra_fields(self) -> list[str]:
        return []

    def display(self) -> str:
        return self._status_line()


@dataclass(slots=True)
class Deadline(_TaskBehaviour):
    kind: ClassVar[TaskType] = TaskType.DEADLINE

    description: str
    by: str
    done: bool = False

    def __post_init__(self) -> None:
        self.description = _require_description(self.description)
        self.by = _require_date(
            self.by, "Deadline cannot be empty: Please specify deadline time with /by"
        )

    @property
    def due_date(self) -> date:
        parsed = parse_date(self.by)
        assert parsed is not None, "deadline validated at construction"
        return parsed

    def is_due(self, query: str | date) -> bool:
        """Due iff not done and the query date is strictly after the deadline."""
        q = _query_date(query)
        if q is None or self.done:
            return False
        return q > self.due_date

    def extra_fields(self) -> list[str]:
        return [self.by]

    def display(self) -> str:
        return f"{self._status_line()} (by: {format_date(self.by)})"


@dataclass(slots=True)
class Event(_TaskBehaviour):
    kind: ClassVar[TaskType] = TaskType.EVENT

    description: str
    start: str
    end: str
    done: bool = False

    def __post_init__(self) -> None:
        self.description = _require_description(self.description)
        self.start = _require_date(
            self.start,
            "Event start time cannot be empty: Please specify event start time with /from",
        )
        self.end = _require_date(
            self.end, "Event end time cannot be empty: Please specify event end time with /to"
        )
        if not self.start_date < self.end_date:
            raise TaskError("Event start must be before end")

    @property
    def start_date(self) -> date:
        parsed = parse_date(self.start)
        assert parsed is not None, "start validated at construction"
        return parsed

    @property
    def end_date(self) -> date:
        parsed = parse_date(self.end)
        assert parsed is not None, "end validated at construction"
        return parsed

    def is_due(self, query: str | date) -> bool:
        """Due iff not done and the query date is strictly after the event's end."""
        q = _query_date(query)
        if q is None or self.done:
            return False
        return q > self.end_date

    def extra_fields(self) -> list[str]:
        return [f"{self.start}-{self.end}"]

    def display(self) -> str:
        return (
            f"{self._status_line()} "
            f"(from: {format_date(self.start)} to: {format_date(self.end)})"
        )


Task = Todo | Deadline | Event


# ---- building from user input ----


def _description_part(body: str) -> str:
    return body.split("/", 1)[0].strip()


def _extract_param(body: str, marker: str) -> str:
    """
    Return the value after "/<marker>" in `body`, or "" if absent.

    Only whole-word markers count ("/by 2025-01-01", not "/bypass").
    The text before the first "/" is the description and is never scanned.
    """
    found: list[str] = []
    for segment in body.split("/")[1:]:
        word, _, rest = segment.partition(" ")
        if word == marker:
            found.append(rest.strip())
    if len(found) > 1:
        raise TaskError(f"Multiple /{marker} parameters specified")
    return found[0] if found else ""


def build_task(raw: str) -> tuple[Task | None, str | None]:
    """
    Build a task from a user command line.

    Returns (task, None) on success or (None, error_message) on failure;
    validation problems never raise out of here.
    """
    try:
        if raw.startswith("todo "):
            return Todo(raw[len("todo ") :].strip()), None

        if raw.startswith("deadline "):
            body = raw[len("deadline ") :].strip()
            by = _extract_param(body, "by")
            return Deadline(_description_part(body), by), None

        if raw.startswith("event "):
            body = raw[len("event ") :].strip()
            start = _extract_param(body, "from")
            end = _extract_param(body, "to")
            return Event(_description_part(body), start, end), None

    except TaskError as e:
        return None, str(e)

    return None, f"Specify Task Description: {raw} <task description>"


# ---- saved records ----


def to_record(task: Task) -> str:
    """Serialize to "|<T|D|E>|<0|1>|<description>|[<extra>|]"."""
    parts = [task.kind.value, "1" if task.done else "0", task.description, *task.extra_fields()]
    return "|" + "|".join(parts) + "|"


def _split_range(value: str) -> tuple[str, str]:
    # "2025-01-01-2025-01-03" -> ("2025-01-01", "2025-01-03")
    pieces = value.split("-")
    if len(pieces) != 6:
        raise RecordFormatError(f"Invalid event range: {value}")
    return "-".join(pieces[:3]), "-".join(pieces[3:])


def from_record(line: str) -> Task:
    """
    Rebuild a task from one saved line.

    The variant constructors run again, so a corrupted date or an inverted
    event range fails here exactly as it would on input.

    Raises:
        RecordFormatError: structurally broken line (too few fields, unknown tag).
        TaskError: fields present but invalid.
    """
    parts = line.rstrip("\r\n").split("|")
    while parts and parts[-1] == "":
        parts.pop()

    if len(parts) < 3:
        raise RecordFormatError(f"Invalid task save string: {line.strip()}")

    tag, flag, fields = parts[1], parts[2], parts[3:]
    try:
        kind = TaskType(tag)
    except ValueError:
        raise RecordFormatError(f"Unknown task type: {tag}") from None

    if not fields:
        raise RecordFormatError(f"Missing task description: {line.strip()}")

    done = flag == "1"
    description = fields[0]

    if kind is TaskType.TODO:
        return Todo(description, done=done)

    if len(fields) < 2:
        raise RecordFormatError(f"Missing date field: {line.strip()}")

    if kind is TaskType.DEADLINE:
        return Deadline(description, fields[1], done=done)

    start, end = _split_range(fields[1])
    return Event(description, start, end, done=done)
