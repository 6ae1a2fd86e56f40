# src/meep/cli/parser.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.ports import Command, CommandEmitter
from ..core.state import AppState
from .commands import (
    CHECK_DUE_PREFIX,
    INVALID_TASK_NUMBER,
    AddMessageCommand,
    AddTaskCommand,
    ByeCommand,
    CheckDueCommand,
    DeleteCommand,
    FindCommand,
    HelloCommand,
    HelpCommand,
    HowAreYouCommand,
    ListMessagesCommand,
    ListTasksCommand,
    LoadCommand,
    MarkCommand,
    SaveCommand,
    UnknownCommand,
    UnmarkCommand,
)

CommandFactory = Callable[[AppState, str], Command]
LineMatcher = Callable[[str], bool]

logger = logging.getLogger(__name__)

_TASK_NUMBER_RE = re.compile(r"[+-]?[0-9]+")
TASK_VERBS = frozenset({"todo", "deadline", "event"})


class InvalidTaskNumberError(ValueError):
    """mark/unmark/delete got an argument that is not an integer."""

    def __init__(self, token: str) -> None:
        super().__init__(INVALID_TASK_NUMBER)
        self.token = token


def parse_task_number(token: str) -> int | None:
    """Parse a 1-based task number. Returns None for anything that is not an integer."""
    if not _TASK_NUMBER_RE.fullmatch(token):
        return None
    return int(token)


def normalize_line(line: str) -> str:
    """Strip and collapse runs of whitespace: "  find   abc " -> "find abc"."""
    return " ".join(line.split())


class CommandParser:
    """
    Maps an input line to a Command.

    Lookup order:
    1. exact phrases ("hello", "list", ...)
    2. rules, in registration order; the first matching rule wins
    3. UnknownCommand
    """

    def __init__(self) -> None:
        self._phrases: dict[str, CommandFactory] = {}
        self._rules: list[tuple[LineMatcher, CommandFactory]] = []

    def register_phrase(self, phrase: str, factory: CommandFactory) -> None:
        self._phrases[phrase] = factory

    def register_rule(self, matches: LineMatcher, factory: CommandFactory) -> None:
        self._rules.append((matches, factory))

    def build(self, state: AppState, line: str) -> Command:
        """
        Build the command for `line` without recording it.
        Raises InvalidTaskNumberError for a non-numeric mark/unmark/delete argument.
        """
        factory = self._phrases.get(line)
        if factory is not None:
            return factory(state, line)

        for matches, factory in self._rules:
            if matches(line):
                return factory(state, line)

        return UnknownCommand(state, line)

    def parse(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> Command | None:
        """
        Interactive parse: record the line, then build its command.

        A non-numeric task number is reported through `emit` as
        "Invalid task number." and no command is built (returns None).
        """
        AddMessageCommand(state, line).execute()
        try:
            return self.build(state, line)
        except InvalidTaskNumberError as e:
            logger.debug("Invalid task number %r in %r", e.token, line)
            if emit is not None:
                emit(INVALID_TASK_NUMBER)
            return None

    def parse_quiet(self, state: AppState, line: str) -> Command:
        """
        Non-interactive parse for GUI-style callers: record the raw line, normalize
        whitespace, build. Nothing is emitted; InvalidTaskNumberError propagates.
        """
        AddMessageCommand(state, line).execute()
        return self.build(state, normalize_line(line))


def _starts_with(prefix: str) -> LineMatcher:
    return lambda line: line.startswith(prefix)


def _is_task_verb(line: str) -> bool:
    return line.split(" ", 1)[0] in TASK_VERBS


def _numbered(command_cls: Callable[[AppState, int], Command]) -> CommandFactory:
    def factory(state: AppState, line: str) -> Command:
        parts = line.split(" ")
        token = parts[1] if len(parts) > 1 else ""
        number = parse_task_number(token)
        if number is None:
            raise InvalidTaskNumberError(token)
        return command_cls(state, number)

    return factory


def _check_due(state: AppState, line: str) -> Command:
    return CheckDueCommand(state, line[len(CHECK_DUE_PREFIX) :].strip())


def _find(state: AppState, line: str) -> Command:
    return FindCommand(state, line.split(" ", 1)[1])


parser = CommandParser()

parser.register_phrase("hello", lambda state, _line: HelloCommand(state))
parser.register_phrase("how are you?", lambda state, _line: HowAreYouCommand(state))
parser.register_phrase("list messages", lambda state, _line: ListMessagesCommand(state))
parser.register_phrase("list", lambda state, _line: ListTasksCommand(state))
parser.register_phrase("help", lambda state, _line: HelpCommand(state))
parser.register_phrase("bye", lambda state, _line: ByeCommand(state))

parser.register_rule(_starts_with("mark "), _numbered(MarkCommand))
parser.register_rule(_starts_with("unmark "), _numbered(UnmarkCommand))
parser.register_rule(_starts_with("delete "), _numbered(DeleteCommand))
parser.register_rule(_is_task_verb, AddTaskCommand)
parser.register_rule(_starts_with("save"), lambda state, _line: SaveCommand(state))
parser.register_rule(_starts_with("load"), lambda state, _line: LoadCommand(state))
parser.register_rule(_starts_with(CHECK_DUE_PREFIX), _check_due)
parser.register_rule(_starts_with("find "), _find)


def parse(state: AppState, line: str, emit: CommandEmitter | None = None) -> Command | None:
    return parser.parse(state, line, emit)


def parse_quiet(state: AppState, line: str) -> Command:
    return parser.parse_quiet(state, line)
