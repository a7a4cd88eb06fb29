"""Search files for lines matching a regular expression."""

from __future__ import annotations

import io
import os
import re
from collections.abc import AsyncIterator, Iterable

from winix.cat import PathLike, _iter_lines, _read_bytes


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"invalid pattern {pattern!r}: {exc}") from exc


def _format_match(path: PathLike, number: int, line: str) -> str:
    return f"{os.fspath(path)}:{number}: {line}\n"


def grep_sync(pattern: str, files: Iterable[PathLike]) -> str:
    """Return every matching line as ``path:line_number: line``.

    Raises ValueError for an invalid pattern.
    """
    regex = _compile(pattern)
    parts: list[str] = []
    for path in files:
        with open(path, "rb") as handle:
            for number, line in enumerate(_iter_lines(handle), start=1):
                if regex.search(line):
                    parts.append(_format_match(path, number, line))
    return "".join(parts)


async def grep_async(pattern: str, files: Iterable[PathLike]) -> AsyncIterator[bytes]:
    """Stream matching lines of the first file as UTF-8 chunks."""
    regex = _compile(pattern)
    paths = list(files)
    if not paths:
        return
    path = paths[0]
    data = await _read_bytes(path)
    for number, line in enumerate(_iter_lines(io.BytesIO(data)), start=1):
        if regex.search(line):
            yield _format_match(path, number, line).encode("utf-8")


async def grep_async_to_string(pattern: str, files: Iterable[PathLike]) -> str:
    """Collect the output of :func:`grep_async` into one string."""
    parts: list[str] = []
    async for chunk in grep_async(pattern, files):
        try:
            parts.append(chunk.decode("utf-8"))
        except UnicodeDecodeError:
            continue
    return "".join(parts)