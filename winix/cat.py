"""Concatenate files, normalising CRLF line endings to LF."""

from __future__ import annotations

import asyncio
import contextlib
import io
import os
import time
from collections.abc import AsyncIterator, Iterable, Iterator
from pathlib import Path
from typing import BinaryIO, Union

PathLike = Union[str, "os.PathLike[str]"]


def _iter_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield decoded lines with their LF or CRLF terminator removed."""
    for raw in stream:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        yield raw.decode("utf-8")


def _normalize(line: str) -> str:
    """Drop one remaining carriage return and terminate with LF."""
    return line.removesuffix("\r") + "\n"


async def _read_bytes(path: PathLike) -> bytes:
    return await asyncio.to_thread(Path(path).read_bytes)


def cat(files: Iterable[PathLike]) -> str:
    """Return the contents of all files joined, with LF line endings."""
    parts: list[str] = []
    for path in files:
        with open(path, "rb") as handle:
            parts.extend(_normalize(line) for line in _iter_lines(handle))
    return "".join(parts)


async def cat_async(files: Iterable[PathLike]) -> AsyncIterator[bytes]:
    """Stream the normalised lines of the first file as UTF-8 chunks."""
    paths = list(files)
    if not paths:
        return
    data = await _read_bytes(paths[0])
    for line in _iter_lines(io.BytesIO(data)):
        yield _normalize(line).encode("utf-8")


async def cat_async_to_string(files: Iterable[PathLike]) -> str:
    """Read every file asynchronously and join their normalised lines.

    A file that cannot be opened raises; undecodable content ends that
    file's output early.
    """
    parts: list[str] = []
    for path in files:
        data = await _read_bytes(path)
        try:
            for line in _iter_lines(io.BytesIO(data)):
                parts.append(_normalize(line))
        except UnicodeDecodeError:
            continue
    return "".join(parts)


async def benchmark_cat_sync_vs_async(files: Iterable[PathLike]) -> tuple[float, float]:
    """Time the synchronous and asynchronous readers, in seconds."""
    paths = list(files)

    start = time.perf_counter()
    with contextlib.suppress(OSError, ValueError):
        cat(paths)
    sync_duration = time.perf_counter() - start

    start = time.perf_counter()
    with contextlib.suppress(OSError, ValueError):
        await cat_async_to_string(paths)
    async_duration = time.perf_counter() - start

    return sync_duration, async_duration