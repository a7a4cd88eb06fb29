"""Tokenise terminal output containing ANSI escape sequences."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

_ESCAPE = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")


@dataclass(frozen=True)
class SetColor:
    """Switch the foreground colour to the named colour."""

    color: str


@dataclass(frozen=True)
class ResetColor:
    """Restore default text attributes."""


@dataclass(frozen=True)
class MoveCursor:
    """Move the cursor to a row and column."""

    row: int
    column: int


@dataclass(frozen=True)
class ClearLine:
    """Erase from the cursor to the end of the line."""


@dataclass(frozen=True)
class PrintText:
    """Plain text between escape sequences."""

    text: str


AnsiEvent = Union[SetColor, ResetColor, MoveCursor, ClearLine, PrintText]

_KNOWN_SEQUENCES: dict[str, AnsiEvent] = {
    "\x1b[0m": ResetColor(),
    "\x1b[31m": SetColor("Red"),
    "\x1b[32m": SetColor("Green"),
    "\x1b[K": ClearLine(),
}


def parse(data: bytes) -> list[AnsiEvent]:
    """Split raw terminal output into text and control events.

    Input that is not valid UTF-8 yields no events. Escape sequences that
    are not recognised are dropped.
    """
    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        return []

    events: list[AnsiEvent] = []
    last = 0
    for match in _ESCAPE.finditer(text):
        if match.start() > last:
            events.append(PrintText(text[last:match.start()]))
        event = _KNOWN_SEQUENCES.get(match.group())
        if event is not None:
            events.append(event)
        last = match.end()

    if last < len(text):
        events.append(PrintText(text[last:]))
    return events