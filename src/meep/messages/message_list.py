# src/meep/messages/message_list.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..core.indexed_list import IndexedList

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class Message:
    """A recorded input line. The timestamp is captured once, at construction."""

    text: str
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if self.text is None:
            raise TypeError("message text must not be None")

    def display(self) -> str:
        return f"[{self.created_at.strftime(TIMESTAMP_FORMAT)}] {self.text}"

    def __str__(self) -> str:
        return self.display()


class MessageList(IndexedList[Message]):
    def add(self, text: str) -> Message:
        """Record `text` as a new message and return it."""
        message = Message(text)
        self.append(message)
        return message
