"""Start a command detached from the current terminal."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence

_DETACHED_PROCESS = 0x00000008


def main(argv: Sequence[str] | None = None) -> int:
    """Launch the given command in the background with no standard streams."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: disown <command> [args...]", file=sys.stderr)
        return 1

    streams = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
    }
    try:
        if os.name == "nt":
            subprocess.Popen(args, creationflags=_DETACHED_PROCESS, **streams)
            print("Process disowned (Windows)")
        else:
            subprocess.Popen(["nohup", *args], **streams)
            print("Process disowned (Unix-based OS)")
    except OSError as exc:
        print(f"Failed to disown process: {exc}", file=sys.stderr)
    return 0