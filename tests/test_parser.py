# tests/test_parser.py

from __future__ import annotations

import pytest

from meep.cli.commands import (
    AddTaskCommand,
    ByeCommand,
    CheckDueCommand,
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
)
from meep.cli.parser import (
    CommandParser,
    InvalidTaskNumberError,
    normalize_line,
    parse,
    parse_quiet,
    parse_task_number,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("hello", HelloCommand),
        ("how are you?", HowAreYouCommand),
        ("list messages", ListMessagesCommand),
        ("list", ListTasksCommand),
        ("help", HelpCommand),
        ("bye", ByeCommand),
        ("mark 1", MarkCommand),
        ("todo read", AddTaskCommand),
        ("deadline d /by 2025-08-30", AddTaskCommand),
        ("event e /from 2025-08-28 /to 2025-08-30", AddTaskCommand),
        ("todo", AddTaskCommand),
        ("save", SaveCommand),
        ("load", LoadCommand),
        ("check due 2025-08-30", CheckDueCommand),
        ("find abc", FindCommand),
        ("find", UnknownCommand),
        ("Hello", UnknownCommand),
        ("list  ", UnknownCommand),
        ("unknown 123", UnknownCommand),
    ],
)
def test_routes_lines_to_commands(state, line: str, expected: type) -> None:
    assert isinstance(parse(state, line), expected)


def test_every_line_is_recorded_first(state, emitter) -> None:
    parse(state, "hello")
    parse(state, "mark abc", emit=emitter)
    parse(state, "whatever")
    assert [m.text for m in state.messages] == ["hello", "mark abc", "whatever"]


def test_mark_routes_to_the_right_task(state) -> None:
    for raw in ("todo a", "todo b", "todo c"):
        parse(state, raw).execute()

    parse(state, "mark 2").execute()
    assert [t.done for t in state.tasks] == [False, True, False]


@pytest.mark.parametrize("line", ["mark abc", "unmark abc", "delete abc", "mark ", "delete 1.5"])
def test_interactive_parse_reports_invalid_number(state, emitter, line: str) -> None:
    parse(state, "todo keep").execute()
    state_before = [t.display() for t in state.tasks]

    assert parse(state, line, emit=emitter) is None
    assert emitter.emitted == ["Invalid task number."]
    assert [t.display() for t in state.tasks] == state_before


def test_check_due_takes_date_after_fixed_offset(state) -> None:
    command = parse(state, "check due   2025-08-30 ")
    assert isinstance(command, CheckDueCommand)
    assert command.date_text == "2025-08-30"


def test_find_needle_is_everything_after_first_space(state) -> None:
    command = parse(state, "find two words")
    assert isinstance(command, FindCommand)
    assert command.needle == "two words"


def test_quiet_parse_raises_instead_of_emitting(state) -> None:
    with pytest.raises(InvalidTaskNumberError):
        parse_quiet(state, "mark abc")
    assert [m.text for m in state.messages] == ["mark abc"]


def test_quiet_parse_normalizes_whitespace(state) -> None:
    command = parse_quiet(state, "   find    abc   ")
    assert isinstance(command, FindCommand)
    assert command.execute() == 'No tasks found matching: "abc"'
    # the raw line is what gets recorded
    assert state.messages.get(0).text == "   find    abc   "


def test_parse_task_number() -> None:
    assert parse_task_number("3") == 3
    assert parse_task_number("-1") == -1
    assert parse_task_number("+2") == 2
    assert parse_task_number("") is None
    assert parse_task_number("abc") is None
    assert parse_task_number("1_000") is None


def test_normalize_line() -> None:
    assert normalize_line("  a   b\tc ") == "a b c"


def test_custom_parser_uses_registration_order(state) -> None:
    p = CommandParser()
    p.register_rule(lambda line: line.startswith("h"), lambda s, _line: HelpCommand(s))
    p.register_rule(lambda line: line.startswith("he"), lambda s, _line: HelloCommand(s))

    assert isinstance(p.build(state, "hey"), HelpCommand)
    assert isinstance(p.build(state, "nothing"), UnknownCommand)
