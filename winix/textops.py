"""Line filters that operate on in-memory text."""

from __future__ import annotations

from collections.abc import Iterator


def _lines(content: str) -> Iterator[str]:
    """Split on LF or CRLF; a trailing empty line is not reported."""
    pieces = content.split("\n")
    last = pieces.pop()
    for piece in pieces:
        yield piece.removesuffix("\r")
    if last:
        yield last


async def grep_async_from_string(pattern: str, content: str) -> str:
    """Return the lines of ``content`` that contain ``pattern`` literally."""
    return "".join(f"{line}\n" for line in _lines(content) if pattern in line)


async def head_async_from_string(content: str, lines: int) -> str:
    """Return the first ``lines`` lines of ``content``."""
    taken = []
    for index, line in enumerate(_lines(content)):
        if index >= lines:
            break
        taken.append(f"{line}\n")
    return "".join(taken)