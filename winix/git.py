"""Run git commands through the system git executable."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from termcolor import colored

_COMMON_COMMANDS = [
    ("status", "Show working tree status"),
    ("log", "Show commit logs"),
    ("add <file>", "Add file contents to index"),
    ("commit", "Record changes to repository"),
    ("push", "Update remote refs"),
    ("pull", "Fetch and merge from remote"),
    ("clone <url>", "Clone a repository"),
    ("branch", "List, create, or delete branches"),
    ("checkout", "Switch branches or restore files"),
    ("merge", "Join development histories"),
    ("diff", "Show changes between commits"),
    ("reset", "Reset current HEAD to state"),
    ("stash", "Stash changes in working directory"),
    ("remote", "Manage remote repositories"),
    ("init", "Create empty Git repository"),
]

_EXAMPLES = [
    "git status",
    "git log --oneline",
    "git add .",
    'git commit -m "Initial commit"',
    "git push origin main",
    "git pull origin main",
    "git branch -a",
    "git checkout -b new-feature",
]


def _run_git(args: Sequence[str]) -> subprocess.CompletedProcess[bytes] | None:
    """Run git with the given arguments, or return None if it cannot start."""
    try:
        return subprocess.run(["git", *args], capture_output=True, check=False)
    except OSError:
        return None


def execute(args: Sequence[str]) -> None:
    """Run ``git`` with ``args``, or show help when there are none."""
    if not is_git_available():
        print(colored("Error: Git is not installed or not in PATH", "red"))
        print(colored("Please install Git and ensure it's in your PATH", "yellow"))
        return
    if not args:
        _show_git_help()
        return
    _execute_git_command(args)


def is_git_available() -> bool:
    """Return whether ``git --version`` runs successfully."""
    result = _run_git(["--version"])
    return result is not None and result.returncode == 0


def _execute_git_command(args: Sequence[str]) -> None:
    try:
        result = subprocess.run(["git", *args], capture_output=True, check=False)
    except OSError as exc:
        print(colored(f"Failed to execute git command: {exc}", "red"), file=sys.stderr)
        return

    if result.stdout:
        print(result.stdout.decode("utf-8", errors="replace"), end="")
    if result.stderr:
        print(result.stderr.decode("utf-8", errors="replace"), end="", file=sys.stderr)
    if result.returncode != 0:
        print(
            colored(f"Git command failed with exit code: {result.returncode}", "red"),
            file=sys.stderr,
        )


def interactive_mode() -> None:
    """Read git subcommands from standard input until ``exit`` or ``quit``."""
    print(colored("Git Interactive Mode", "green", attrs=["bold"]))
    print(colored("Type git commands (without 'git' prefix) or 'exit' to quit", attrs=["dark"]))
    print(colored('Example: status, log --oneline, add ., commit -m "message"', attrs=["dark"]))
    print()

    while True:
        try:
            line = input(colored("git> ", "cyan", attrs=["bold"]))
        except EOFError:
            break
        except OSError as exc:
            print(colored(f"Error reading input: {exc}", "red"), file=sys.stderr)
            break

        command = line.strip()
        if not command:
            continue
        if command in ("exit", "quit"):
            print(colored("Exiting git interactive mode", "green"))
            break
        _execute_git_command(command.split())


def _show_git_help() -> None:
    print(colored("Git Commands Available", "green", attrs=["bold"]))
    print(colored("Usage: git <command> [options]", attrs=["dark"]))
    print()

    print(colored("Most Common Git Commands:", "white", attrs=["bold"]))
    for name, description in _COMMON_COMMANDS:
        print(f"  {colored(f'{name:<15}', 'yellow')} {description}")
    print()

    print(colored("Examples:", "cyan", attrs=["bold"]))
    for example in _EXAMPLES:
        print(f"  {colored(example, attrs=['dark'])}")
    print()

    print(colored("Interactive Mode:", "magenta", attrs=["bold"]))
    print(f"  {colored('git --interactive', attrs=['dark'])}")
    print(f"  {colored('  Enter interactive git mode for easier command execution', attrs=['dark'])}")


def is_git_repo() -> bool:
    """Return whether the current directory is inside a git repository."""
    if Path(".git").exists():
        return True
    if "GIT_DIR" in os.environ:
        return True
    result = _run_git(["rev-parse", "--git-dir"])
    return result is not None and result.returncode == 0


def get_current_branch() -> str | None:
    """Return the checked-out branch name, or None if there is none."""
    result = _run_git(["branch", "--show-current"])
    if result is None or result.returncode != 0:
        return None
    branch = result.stdout.decode("utf-8", errors="replace").strip()
    return branch or None


def get_repo_status() -> str | None:
    """Return ``"clean"`` or ``"dirty"`` for the working tree, or None on failure."""
    result = _run_git(["status", "--porcelain"])
    if result is None or result.returncode != 0:
        return None
    status = result.stdout.decode("utf-8", errors="replace")
    return "clean" if not status.strip() else "dirty"