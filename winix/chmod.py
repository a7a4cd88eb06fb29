"""The chmod command: change file permission bits."""

from __future__ import annotations

import os
import stat
from collections.abc import Sequence
from dataclasses import dataclass

from termcolor import colored

_TARGETS = ("owner", "group", "other")
_WHO = {
    "u": ("owner",),
    "g": ("group",),
    "o": ("other",),
    "a": _TARGETS,
}
_BITS = {"r": 4, "w": 2, "x": 1}
_PERMISSION_CHARS = "rwxXst" + "ugo"
_OPERATIONS = "+-="


class ChmodError(Exception):
    """Raised when a mode is invalid or cannot be applied."""


@dataclass
class FilePermissions:
    """Read, write and execute bits for owner, group and other."""

    owner: int = 0
    group: int = 0
    other: int = 0

    @classmethod
    def from_mode(cls, mode: int) -> FilePermissions:
        """Build from the low nine bits of a numeric file mode."""
        return cls((mode >> 6) & 7, (mode >> 3) & 7, mode & 7)

    def _check_target(self, target: str, perm: str) -> None:
        if target not in _TARGETS:
            raise ChmodError(f"Invalid permission: {perm} for {target}")

    def add(self, target: str, perm: str, filename: str) -> None:
        """Grant ``perm`` to ``target``; ``X`` grants execute only on directories."""
        if perm in _BITS:
            self._check_target(target, perm)
            setattr(self, target, getattr(self, target) | _BITS[perm])
        elif perm == "X":
            if target in _TARGETS and os.path.isdir(filename):
                setattr(self, target, getattr(self, target) | _BITS["x"])
        elif perm in ("s", "t"):
            return
        else:
            raise ChmodError(f"Invalid permission: {perm} for {target}")

    def remove(self, target: str, perm: str) -> None:
        """Revoke ``perm`` from ``target``; ``X`` revokes execute."""
        if perm in _BITS:
            self._check_target(target, perm)
            setattr(self, target, getattr(self, target) & ~_BITS[perm])
        elif perm == "X":
            if target in _TARGETS:
                setattr(self, target, getattr(self, target) & ~_BITS["x"])
        elif perm in ("s", "t"):
            return
        else:
            raise ChmodError(f"Invalid permission: {perm} for {target}")

    def clear(self, target: str) -> None:
        """Remove every bit from ``target``."""
        if target in _TARGETS:
            setattr(self, target, 0)

    def to_octal(self) -> str:
        """Return the three-digit octal mode, e.g. ``"755"``."""
        return f"{self.owner}{self.group}{self.other}"


def _apply_expression(perms: FilePermissions, filename: str, expr: str) -> None:
    if not expr:
        raise ChmodError("Empty expression")

    who_end = 0
    while who_end < len(expr) and expr[who_end] in _WHO:
        who_end += 1
    who = expr[:who_end] or "a"

    if who_end >= len(expr):
        raise ChmodError("Invalid symbolic expression: missing operation")
    operation = expr[who_end]
    if operation not in _OPERATIONS:
        raise ChmodError("Invalid operation: must be +, -, or =")

    permissions = expr[who_end + 1:]
    for ch in permissions:
        if ch not in _PERMISSION_CHARS:
            raise ChmodError(f"Invalid permission character: '{ch}'")

    for who_char in who:
        for target in _WHO[who_char]:
            if operation == "=":
                perms.clear(target)
            for perm in permissions:
                if operation == "-":
                    perms.remove(target, perm)
                else:
                    perms.add(target, perm, filename)


def _current_permissions(filename: str) -> FilePermissions:
    try:
        return FilePermissions.from_mode(stat.S_IMODE(os.stat(filename).st_mode))
    except OSError as exc:
        raise ChmodError(f"cannot read permissions of '{filename}': {exc.strerror or exc}") from exc


def symbolic_to_octal(filename: str, mode: str) -> str:
    """Resolve comma-separated symbolic expressions against the file's current mode."""
    perms = _current_permissions(filename)
    for expr in mode.split(","):
        _apply_expression(perms, filename, expr.strip())
    return perms.to_octal()


def _validate_octal(mode: str) -> None:
    if not 1 <= len(mode) <= 4 or not all(c in "01234567" for c in mode):
        raise ChmodError("Invalid mode")


def _apply_octal(filename: str, octal_mode: str) -> None:
    if len(octal_mode) < 3:
        raise ChmodError("Octal mode must be at least 3 digits")
    digits = octal_mode[1:4] if len(octal_mode) == 4 else octal_mode[:3]
    try:
        os.chmod(filename, int(digits, 8))
    except OSError as exc:
        raise ChmodError(
            f"failed to change permissions of '{filename}': {exc.strerror or exc}"
        ) from exc


def apply_mode(filename: str, mode: str) -> None:
    """Apply an octal or symbolic ``mode`` to ``filename``."""
    if all(c.isascii() and c.isdigit() for c in mode):
        _validate_octal(mode)
        _apply_octal(filename, mode)
    else:
        _apply_octal(filename, symbolic_to_octal(filename, mode))


def _print_usage() -> None:
    print(colored("Usage: chmod [OPTION]... MODE[,MODE]... FILE...", "red"))
    print(colored("   or: chmod [OPTION]... OCTAL-MODE FILE...", "red"))
    print()
    print(colored("Examples:", "yellow"))
    for example in (
        "chmod 755 myfile.txt",
        "chmod u+x script.sh",
        "chmod g-w,o-w file.txt",
        "chmod a=r file.txt",
        "chmod u=rwx,g=rx,o=r file.txt",
    ):
        print(f"  {colored(example, attrs=['dark'])}")


def execute(args: Sequence[str]) -> None:
    """Apply the mode in ``args[0]`` to every following file."""
    if len(args) < 2:
        _print_usage()
        return

    mode, files = args[0], args[1:]
    for filename in files:
        if not os.path.exists(filename):
            print(colored(f"chmod: cannot access '{filename}': No such file or directory", "red"))
            continue
        try:
            apply_mode(filename, mode)
        except ChmodError as exc:
            print(colored(f"chmod: {exc}", "red"))
        else:
            print(colored(f"Permissions changed for '{filename}'", "green"))