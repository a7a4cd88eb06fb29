"""Print the first lines of files."""

from __future__ import annotations

import io
import itertools
from collections.abc import AsyncIterator, Iterable

from winix.cat import PathLike, _iter_lines, _normalize, _read_bytes


def head_sync(files: Iterable[PathLike], lines: int) -> str:
    """Return up to ``lines`` lines taken across the files in order."""
    parts: list[str] = []
    remaining = lines
    for path in files:
        if remaining <= 0:
            break
        with open(path, "rb") as handle:
            for line in itertools.islice(_iter_lines(handle), remaining):
                parts.append(_normalize(line))
                remaining -= 1
    return "".join(parts)


async def head_async(files: Iterable[PathLike], lines: int) -> AsyncIterator[bytes]:
    """Stream up to ``lines`` normalised lines of the first file."""
    paths = list(files)
    if not paths:
        return
    data = await _read_bytes(paths[0])
    for line in itertools.islice(_iter_lines(io.BytesIO(data)), max(lines, 0)):
        yield _normalize(line).encode("utf-8")


async def head_async_to_string(files: Iterable[PathLike], lines: int) -> str:
    """Collect the output of :func:`head_async` into one string."""
    parts: list[str] = []
    async for chunk in head_async(files, lines):
        try:
            parts.append(chunk.decode("utf-8"))
        except UnicodeDecodeError:
            continue
    return "".join(parts)