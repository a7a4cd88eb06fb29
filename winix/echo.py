"""The echo command."""

from __future__ import annotations

from collections.abc import Sequence


def run(args: Sequence[str]) -> None:
    """Print the arguments joined by single spaces, without a newline."""
    print(" ".join(args), end="", flush=True)