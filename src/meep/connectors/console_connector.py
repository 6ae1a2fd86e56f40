# src/meep/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import FAREWELL, LoadCommand
from ..cli.parser import parse
from ..core.state import AppState

logger = logging.getLogger(__name__)

BANNER = "Hello from Meep!\nWhat can I do for you?"
RULE = "-" * 50
EXIT_LINE = "bye"


def frame(text: str) -> str:
    return f"{RULE}\n{text}\n{RULE}"


def run_console_loop(
    state: AppState,
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Read-eval-print loop.

    Stops on the exact line "bye" ("bye " with a trailing space is just another
    input), on EOF, or on Ctrl+C.
    """
    logger.info("Console connector started.")

    def emit(text: str) -> None:
        write(frame(text))

    emit(BANNER)

    if getattr(state.settings, "autoload", False):
        emit(LoadCommand(state).execute())

    while True:
        try:
            line = read_line()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            break

        if line == EXIT_LINE:
            logger.info("Console exit command received.")
            break

        try:
            command = parse(state, line, emit=emit)
            response = command.execute() if command is not None else ""
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response:
            emit(response)

    emit(FAREWELL)
    logger.info("Console connector finished.")
