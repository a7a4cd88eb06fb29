"""The chown command: change the owner and group of files."""

from __future__ import annotations

import os
from collections.abc import Sequence

from termcolor import colored

try:
    import grp
    import pwd
except ImportError:
    grp = None
    pwd = None


class ChownError(Exception):
    """Raised when ownership of a file cannot be changed."""


def parse_spec(mode: str) -> tuple[str | None, str | None]:
    """Split an ``OWNER[:GROUP]`` spec; empty parts become None."""
    user, sep, group = mode.partition(":")
    if not sep:
        return mode, None
    return user or None, group or None


def _lookup_uid(username: str) -> int:
    if pwd is None or not hasattr(os, "chown"):
        raise ChownError("changing file ownership is not supported on this platform")
    try:
        return pwd.getpwnam(username).pw_uid
    except KeyError:
        raise ChownError(f"invalid user: {username}") from None


def _lookup_gid(groupname: str) -> int:
    if grp is None or not hasattr(os, "chown"):
        raise ChownError("changing file ownership is not supported on this platform")
    try:
        return grp.getgrnam(groupname).gr_gid
    except KeyError:
        raise ChownError(f"invalid group: {groupname}") from None


def change_owner(filename: str, mode: str) -> None:
    """Give ``filename`` the owner and group named in ``mode``."""
    user, group = parse_spec(mode)
    uid = _lookup_uid(user) if user is not None else -1
    gid = _lookup_gid(group) if group is not None else -1
    if uid == -1 and gid == -1:
        return
    try:
        os.chown(filename, uid, gid)
    except OSError as exc:
        raise ChownError(
            f"failed to change owner of '{filename}': {exc.strerror or exc}"
        ) from exc


def _print_usage() -> None:
    print(colored("Usage: chown [OPTION]... [OWNER][:[GROUP]] FILE...", "red"))
    print(colored("   or: chown [OPTION]... --reference=RFILE FILE...", "red"))
    print()
    print(colored("Examples:", "yellow"))
    for example in (
        "chown alice file.txt",
        "chown alice:developers file.txt",
        "chown :developers file.txt",
        "chown --recursive alice:developers /mydir",
        "chown --reference=ref.txt file.txt",
    ):
        print(f"  {colored(example, attrs=['dark'])}")


def execute(args: Sequence[str]) -> None:
    """Apply the ownership spec in ``args[0]`` to every following file."""
    if len(args) < 2:
        _print_usage()
        return

    mode, files = args[0], args[1:]
    for filename in files:
        if not os.path.exists(filename):
            print(colored(f"chown: cannot access '{filename}': No such file or directory", "red"))
            continue
        try:
            change_owner(filename, mode)
        except ChownError as exc:
            print(colored(f"chown: {exc}", "red"))
        else:
            print(colored(f"Owner changed for '{filename}'", "green"))