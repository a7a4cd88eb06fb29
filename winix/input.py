"""Interactive line input with a persistent history."""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import Union

from prompt_toolkit import prompt
from prompt_toolkit.history import InMemoryHistory

DEFAULT_HISTORY_FILE = ".history.txt"
_PROMPT = ">> "
_MAX_HISTORY = 100


class LineEditor:
    """Read lines from the terminal, remembering them in a history file."""

    def __init__(self, history_path: Union[str, "os.PathLike[str]"] = DEFAULT_HISTORY_FILE) -> None:
        self._history_path = Path(history_path)
        self._entries = self._load()

    @property
    def history(self) -> tuple[str, ...]:
        """History entries, oldest first."""
        return tuple(self._entries)

    def _load(self) -> list[str]:
        try:
            text = self._history_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return []
        entries = [line for line in text.splitlines() if line]
        return entries[-_MAX_HISTORY:]

    def _save(self) -> None:
        with contextlib.suppress(OSError):
            self._history_path.write_text(
                "".join(f"{entry}\n" for entry in self._entries), encoding="utf-8"
            )

    def read_line(self) -> str:
        """Prompt for one line.

        Raises KeyboardInterrupt on Ctrl+C and EOFError on end of input.
        """
        return prompt(_PROMPT, history=InMemoryHistory(self._entries))

    def add_history_entry(self, line: str) -> None:
        """Remember ``line`` unless it is empty or repeats the last entry, then save."""
        if line and (not self._entries or self._entries[-1] != line):
            self._entries.append(line)
            del self._entries[:-_MAX_HISTORY]
        self._save()