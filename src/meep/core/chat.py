# src/meep/core/chat.py

"""
Request/response entry point for front-ends that render replies themselves
(e.g. a chat-bubble GUI): one input line in, (text, category) out.
"""

from __future__ import annotations

import contextlib
import logging
from typing import NamedTuple

from ..cli.commands import CommandCategory
from ..cli.parser import parse_quiet
from .state import AppState

logger = logging.getLogger(__name__)


class Response(NamedTuple):
    text: str
    category: str


def get_response(state: AppState, text: str) -> Response:
    """
    Parse quietly, execute, and return the reply with its category.

    Any exception (bad task number, unexpected failure) becomes an "Error: ..."
    response so the caller never has to handle one.
    """
    if text is None:
        raise TypeError("input must not be None")

    lock = state.lock if state.lock is not None else contextlib.nullcontext()
    try:
        with lock:
            command = parse_quiet(state, text)
            reply = command.execute()
    except Exception as e:
        logger.debug("get_response failed for %r", text, exc_info=True)
        return Response(f"Error: {e}", CommandCategory.ERROR.value)

    return Response(reply, str(command.category))
