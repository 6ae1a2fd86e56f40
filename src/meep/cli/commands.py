# src/meep/cli/commands.py

"""
One small dataclass per user-facing verb.

Each command carries its already-validated arguments plus the AppState it acts on,
and exposes execute() -> response text. Commands never raise for bad user input;
problems come back as response text. `category` is a stable label a front-end can
use for cosmetic treatment (bubble colour, icon).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from ..core.state import AppState
from ..tasks.task_models import INPUT_DATE_PATTERN, build_task, format_date, is_valid_date
from ..tasks.task_store import StorageError

logger = logging.getLogger(__name__)

GREETING = "Hello there!"
HOW_ARE_YOU_REPLY = "I'm just a program, but thanks for asking!"
FAREWELL = "Bye. Hope to see you again soon!"
INVALID_TASK_NUMBER = "Invalid task number."
CHECK_DUE_PREFIX = "check due"


class CommandCategory(StrEnum):
    ADD_MESSAGE = "AddMessage"
    ADD_TASK = "AddTask"
    HELLO = "Hello"
    HOW_ARE_YOU = "HowAreYou"
    LIST_MESSAGES = "ListMessages"
    LIST_TASKS = "ListTasks"
    MARK = "Mark"
    UNMARK = "Unmark"
    DELETE = "Delete"
    SAVE = "Save"
    LOAD = "Load"
    CHECK_DUE = "CheckDue"
    HELP = "Help"
    FIND = "Find"
    UNKNOWN = "Unknown"
    ERROR = "Error"
    BYE = "Bye"


_HELP_ENTRIES: list[tuple[str, str]] = [
    ("hello", "Greet the program! be polite :)"),
    ("how are you?", "Ask the program how it is doing"),
    ("list messages", "List all messages received"),
    ("list", "List all tasks"),
    ("help", "Show this help message"),
    ("todo <todo description>", "Add a Todo Task to task list"),
    (
        "deadline <deadline description> /by <deadline time>",
        f"Add a Deadline Task to task list (format: {INPUT_DATE_PATTERN})",
    ),
    (
        "event <event description> /from <start time> /to <end time>",
        f"Add an Event Task to task list (format: {INPUT_DATE_PATTERN})",
    ),
    ("mark <task number>", "Mark a task as done"),
    ("unmark <task number>", "Mark a task as not done"),
    ("delete <task number>", "Delete a task from the task list"),
    ("find <keyword>", "Find tasks whose description contains the keyword (case-sensitive)"),
    (
        "check due <date>",
        f"Check for tasks that are due before the specified date (format: {INPUT_DATE_PATTERN})",
    ),
    ("save", "Save all tasks to disk"),
    ("load", "Replace the task list with the tasks saved on disk"),
    ("bye", "Exit the program"),
]


def build_help() -> str:
    lines = ["Here are the list of commands! [case-sensitive]", ""]
    for syntax, description in _HELP_ENTRIES:
        lines.append(f"{syntax}:\n\t{description}")
    return "\n".join(lines)


@dataclass(slots=True)
class AddMessageCommand:
    """Records the raw input line. Silent: the response is always empty."""

    category: ClassVar[CommandCategory] = CommandCategory.ADD_MESSAGE

    state: AppState
    text: str

    def execute(self) -> str:
        self.state.messages.add(self.text)
        return ""


@dataclass(slots=True)
class HelloCommand:
    category: ClassVar[CommandCategory] = CommandCategory.HELLO

    state: AppState

    def execute(self) -> str:
        return GREETING


@dataclass(slots=True)
class HowAreYouCommand:
    category: ClassVar[CommandCategory] = CommandCategory.HOW_ARE_YOU

    state: AppState

    def execute(self) -> str:
        return HOW_ARE_YOU_REPLY


@dataclass(slots=True)
class ListMessagesCommand:
    category: ClassVar[CommandCategory] = CommandCategory.LIST_MESSAGES

    state: AppState

    def execute(self) -> str:
        lines = ["Here are all the messages I've received:"]
        for i, message in enumerate(self.state.messages, start=1):
            lines.append(f" {i}. {message}")
        return "\n".join(lines)


@dataclass(slots=True)
class ListTasksCommand:
    category: ClassVar[CommandCategory] = CommandCategory.LIST_TASKS

    state: AppState

    def execute(self) -> str:
        tasks = self.state.tasks
        lines = ["Here are all the tasks:"]
        for i, task in enumerate(tasks, start=1):
            lines.append(f" {i}. {task}")
        lines.append(f"Now you have {tasks.count()} tasks in the list.")
        return "\n".join(lines)


# Mark / Unmark / Delete: an index that does not name a task yields an empty
# response rather than an error message. Existing front-ends rely on that.


@dataclass(slots=True)
class MarkCommand:
    category: ClassVar[CommandCategory] = CommandCategory.MARK

    state: AppState
    task_number: int

    def execute(self) -> str:
        try:
            task = self.state.tasks.get(self.task_number - 1)
        except IndexError:
            logger.debug("mark: no task %s", self.task_number)
            return ""
        task.mark_done()
        return f"Task {self.task_number} marked as done.\n{task}"


@dataclass(slots=True)
class UnmarkCommand:
    category: ClassVar[CommandCategory] = CommandCategory.UNMARK

    state: AppState
    task_number: int

    def execute(self) -> str:
        try:
            task = self.state.tasks.get(self.task_number - 1)
        except IndexError:
            logger.debug("unmark: no task %s", self.task_number)
            return ""
        task.mark_not_done()
        return f"Task {self.task_number} marked as not done.\n{task}"


@dataclass(slots=True)
class DeleteCommand:
    category: ClassVar[CommandCategory] = CommandCategory.DELETE

    state: AppState
    task_number: int

    def execute(self) -> str:
        try:
            self.state.tasks.remove_at(self.task_number - 1)
        except IndexError:
            logger.debug("delete: no task %s", self.task_number)
            return ""
        return f"Task {self.task_number} deleted."


@dataclass(slots=True)
class AddTaskCommand:
    category: ClassVar[CommandCategory] = CommandCategory.ADD_TASK

    state: AppState
    raw: str

    def execute(self) -> str:
        task, error = build_task(self.raw)
        if task is None:
            logger.debug("add task rejected: %s", error)
            return error or "Unable to build task."

        tasks = self.state.tasks
        tasks.append(task)
        return (
            f"Got it. I've added this task:\n{task}\n"
            f"Now you have {tasks.count()} tasks in the list."
        )


@dataclass(slots=True)
class SaveCommand:
    category: ClassVar[CommandCategory] = CommandCategory.SAVE

    state: AppState

    def execute(self) -> str:
        try:
            self.state.storage.save(self.state.tasks)
        except StorageError:
            return "Error saving tasks."
        return "Tasks saved successfully."


@dataclass(slots=True)
class LoadCommand:
    category: ClassVar[CommandCategory] = CommandCategory.LOAD

    state: AppState

    def execute(self) -> str:
        try:
            report = self.state.storage.load(self.state.tasks)
        except StorageError:
            return "Error loading tasks."

        if report.missing:
            return f"{report.path} not found.\nError loading tasks."

        if report.skipped:
            lines = [f"Skipped line {s.line_no}: {s.reason}" for s in report.skipped]
            lines.append(
                f"Loaded {report.loaded} tasks; "
                f"{len(report.skipped)} malformed line(s) skipped."
            )
            return "\n".join(lines)

        return "Tasks loaded successfully."


@dataclass(slots=True)
class CheckDueCommand:
    category: ClassVar[CommandCategory] = CommandCategory.CHECK_DUE

    state: AppState
    date_text: str

    def execute(self) -> str:
        if not is_valid_date(self.date_text):
            return f"Invalid date format. Please use: {INPUT_DATE_PATTERN}"

        lines = [f"Checking for due tasks on {format_date(self.date_text)}..."]
        for _, task in self.state.tasks.due_on(self.date_text):
            lines.append(str(task))
        return "\n".join(lines)


@dataclass(slots=True)
class FindCommand:
    category: ClassVar[CommandCategory] = CommandCategory.FIND

    state: AppState
    needle: str

    def execute(self) -> str:
        matches = self.state.tasks.find(self.needle)
        if not matches:
            return f'No tasks found matching: "{self.needle}"'

        lines = [f'Found the following tasks matching: "{self.needle}"']
        for k, (_, task) in enumerate(matches, start=1):
            lines.append(f"{k}) {task}")
        return "\n".join(lines)


@dataclass(slots=True)
class HelpCommand:
    category: ClassVar[CommandCategory] = CommandCategory.HELP

    state: AppState

    def execute(self) -> str:
        return build_help()


@dataclass(slots=True)
class UnknownCommand:
    category: ClassVar[CommandCategory] = CommandCategory.UNKNOWN

    state: AppState
    raw: str

    def execute(self) -> str:
        first = self.raw.split(" ")[0]
        return f'Unrecognised command: "{first}" Parrotting...\n{self.raw}'


@dataclass(slots=True)
class ByeCommand:
    """The shell decides whether to terminate; the command only says goodbye."""

    category: ClassVar[CommandCategory] = CommandCategory.BYE

    state: AppState

    def execute(self) -> str:
        return FAREWELL
