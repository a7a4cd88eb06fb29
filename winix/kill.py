"""The kill command: stop processes by PID or by name."""

from __future__ import annotations

import os
import signal
import time
from collections.abc import Sequence

import psutil
from termcolor import colored

from winix.killopts import (
    KillError,
    KillMethod,
    KillOptions,
    _is_numeric,
    parse_arguments,
    signal_to_method,
    validate_options,
)

_PROTECTED_PIDS = frozenset({0, 4, 8})
_DEFAULT_SIGNAL = "9"

_USAGE = (
    "Usage: kill [-signal|-s signal|-p] [-q value] [-a] "
    "[--timeout milliseconds signal] [--] pid|name...\n"
    "\n"
    "Supported signals:\n"
    "-2, -INT    Interrupt (Ctrl+C)\n"
    "-3, -QUIT   Quit (Ctrl+Break)\n"
    "-9, -KILL   Force terminate (default)\n"
    "-15, -TERM  Graceful terminate (Ctrl+C)\n"
    "\n"
    "Examples:\n"
    "kill 1234           # Force terminate process 1234\n"
    "kill -TERM 1234     # Graceful terminate\n"
    "kill -9 1234        # Force terminate\n"
    "kill -a notepad     # Kill all notepad processes"
)


def execute(args: Sequence[str]) -> None:
    """Parse ``args`` and carry out the kill request.

    Raises KillError for bad arguments or when any target could not be killed.
    """
    if not args:
        raise KillError(_USAGE)
    options = parse_arguments(args)
    validate_options(options)
    _handle_kill(options)


def process_exists(pid: int) -> bool:
    """Return whether a live (non-zombie) process with ``pid`` exists."""
    try:
        return psutil.Process(pid).status() != psutil.STATUS_ZOMBIE
    except psutil.NoSuchProcess:
        return False
    except psutil.AccessDenied:
        return True
    except (ValueError, OverflowError):
        return False


def validate_pid_safety(pid: int) -> None:
    """Refuse to target system processes or the current process."""
    if pid in _PROTECTED_PIDS:
        raise KillError(f"Cannot kill system process with PID {pid}")
    if pid == os.getpid():
        raise KillError("Cannot kill current process")


def _name_matches(exe_name: str, target: str) -> bool:
    exe_name = exe_name.lower()
    target = target.lower()
    return (
        exe_name == target
        or exe_name == f"{target}.exe"
        or (exe_name.endswith(".exe") and exe_name[:-4] == target)
    )


def find_processes_by_name(name: str) -> list[int]:
    """Return the PIDs of processes whose executable name matches ``name``.

    Matching ignores case and an optional ``.exe`` suffix.
    """
    pids = []
    for proc in psutil.process_iter(["pid", "name"]):
        exe_name = proc.info.get("name")
        if exe_name and _name_matches(exe_name, name):
            pids.append(proc.info["pid"])
    return pids


def _force_terminate(pid: int) -> None:
    try:
        psutil.Process(pid).kill()
    except psutil.NoSuchProcess:
        raise KillError(f"Invalid PID: Process {pid} does not exist") from None
    except psutil.AccessDenied:
        raise KillError(
            f"Access denied: Cannot terminate process {pid} (insufficient privileges)"
        ) from None
    print(colored(f"Force terminated process {pid} (SIGKILL)", "green"))


def _window_close(pid: int) -> None:
    try:
        psutil.Process(pid).terminate()
    except psutil.NoSuchProcess:
        raise KillError(f"No such process: {pid}") from None
    except psutil.AccessDenied:
        raise KillError(f"Access denied: Cannot close process {pid}") from None
    print(colored(f"Sent close request to process {pid}", "green"))


def _graceful_fallback(pid: int, use_ctrl_break: bool) -> None:
    signal_type = "Ctrl+Break" if use_ctrl_break else "Ctrl+C"
    try:
        _window_close(pid)
    except KillError:
        print(colored(
            f"Warning: Graceful termination failed for process {pid}, using force termination",
            "yellow",
        ))
        _force_terminate(pid)
    else:
        print(colored(
            f"Sent window close message to process {pid} (fallback for {signal_type})",
            "yellow",
        ))


def _graceful_signal(use_ctrl_break: bool) -> int:
    if os.name == "nt":
        name = "CTRL_BREAK_EVENT" if use_ctrl_break else "CTRL_C_EVENT"
    else:
        name = "SIGQUIT" if use_ctrl_break else "SIGINT"
    return getattr(signal, name)


def _graceful_terminate(pid: int, use_ctrl_break: bool) -> None:
    signal_type = "Ctrl+Break (SIGQUIT)" if use_ctrl_break else "Ctrl+C (SIGINT)"
    try:
        psutil.Process(pid).send_signal(_graceful_signal(use_ctrl_break))
    except psutil.NoSuchProcess:
        raise KillError(
            f"Invalid parameter: Process {pid} may not exist or not be a console application"
        ) from None
    except (psutil.AccessDenied, OSError):
        _graceful_fallback(pid, use_ctrl_break)
        return
    print(colored(f"Sent {signal_type} to process {pid}", "green"))


def _kill_with_method(pid: int, method: KillMethod) -> None:
    if method is KillMethod.FORCE_TERMINATE:
        _force_terminate(pid)
    elif method is KillMethod.GRACEFUL_CTRL_C:
        _graceful_terminate(pid, use_ctrl_break=False)
    elif method is KillMethod.GRACEFUL_CTRL_BREAK:
        _graceful_terminate(pid, use_ctrl_break=True)
    else:
        _window_close(pid)


def kill_process_by_pid(pid: int, method: KillMethod, options: KillOptions) -> None:
    """Stop the process ``pid`` using ``method``."""
    validate_pid_safety(pid)
    if not process_exists(pid):
        raise KillError(f"No such process: {pid}")
    _kill_with_method(pid, method)


def kill_process_by_name(name: str, method: KillMethod, options: KillOptions) -> None:
    """Stop the first process named ``name``, or all of them with ``-a``."""
    pids = find_processes_by_name(name)
    if not pids:
        raise KillError(f"No processes found with name: {name}")
    targets = pids if options.all_processes else pids[:1]

    errors = []
    killed = 0
    for pid in targets:
        try:
            kill_process_by_pid(pid, method, options)
        except KillError as exc:
            errors.append(f"Failed to kill {pid} ({name}): {exc}")
        else:
            killed += 1
            print(colored(f"Killed process {pid} ({name})", "green"))
    if errors:
        raise KillError("; ".join(errors))
    if killed == 0:
        raise KillError(f"No processes were killed for name: {name}")


def _handle_print_only(options: KillOptions) -> None:
    for target in options.targets:
        if _is_numeric(target):
            print(target)
            continue
        pids = find_processes_by_name(target)
        if not pids:
            raise KillError(f"No processes found with name: {target}")
        for pid in pids if options.all_processes else pids[:1]:
            print(pid)


def _kill_target(target: str, method: KillMethod, options: KillOptions) -> None:
    if _is_numeric(target):
        try:
            pid = int(target)
        except ValueError:
            raise KillError(f"Invalid PID: {target} must be a number or name") from None
        kill_process_by_pid(pid, method, options)
    else:
        kill_process_by_name(target, method, options)


def _handle_kill(options: KillOptions) -> None:
    if options.print_only:
        _handle_print_only(options)
        return

    chosen = options.signal if options.signal is not None else options.signal_explicit
    method = signal_to_method(chosen if chosen is not None else _DEFAULT_SIGNAL)

    results: list[tuple[str, KillError | None]] = []
    for target in options.targets:
        if _is_numeric(target) and not target:
            raise KillError(f"Invalid PID: {target} must be a number or name")
        try:
            _kill_target(target, method, options)
        except KillError as exc:
            results.append((target, exc))
        else:
            results.append((target, None))

    if options.timeout_ms is not None:
        _handle_timeout_kill(results, options.timeout_ms, options)

    _report_results(results)


def _handle_timeout_kill(
    results: list[tuple[str, KillError | None]], timeout_ms: int, options: KillOptions
) -> None:
    timeout_signal = options.timeout_signal
    if timeout_signal is None:
        raise KillError("Timeout signal not specified")
    timeout_method = signal_to_method(timeout_signal)
    print(colored(
        f"Timeout kill: waiting {timeout_ms} ms before sending {timeout_signal} signal",
        "yellow",
    ))

    target_pids: list[tuple[int, str]] = []
    for target, error in results:
        if error is not None:
            continue
        if _is_numeric(target):
            target_pids.append((int(target), target))
        else:
            pids = find_processes_by_name(target)
            chosen = pids if options.all_processes else pids[:1]
            target_pids.extend((pid, target) for pid in chosen)

    if not target_pids:
        print(colored("No processes to check for timeout kill", "yellow"))
        return

    print(colored(
        f"Waiting {timeout_ms} ms for processes to terminate gracefully...", "cyan"
    ))
    time.sleep(timeout_ms / 1000)

    still_alive = []
    for pid, name in target_pids:
        if process_exists(pid):
            still_alive.append((pid, name))
        else:
            print(colored(f"Process {pid} ({name}) terminated gracefully", "green"))

    if not still_alive:
        print(colored("All processes terminated gracefully within timeout period", "green"))
        return

    print(colored(
        f"Sending {timeout_signal} signal to {len(still_alive)} remaining process(es)",
        "yellow",
    ))
    errors = []
    succeeded = 0
    for pid, name in still_alive:
        try:
            validate_pid_safety(pid)
        except KillError as exc:
            errors.append(f"Cannot kill {pid} ({name}): {exc}")
            continue
        try:
            _kill_with_method(pid, timeout_method)
        except KillError as exc:
            errors.append(f"Timeout kill failed for {pid} ({name}): {exc}")
        else:
            succeeded += 1
            print(colored(
                f"Timeout kill: {timeout_signal} sent to process {pid} ({name})", "green"
            ))
    if errors:
        print(colored(f"Timeout kill errors: {'; '.join(errors)}", "red"))
    if succeeded:
        print(colored(
            f"Timeout kill completed: {succeeded} process(es) killed with {timeout_signal}",
            "green",
        ))


def _report_results(results: list[tuple[str, KillError | None]]) -> None:
    failed = False
    for target, error in results:
        if error is None:
            print(colored(f"Successfully processed target: {target}", "green"))
        else:
            print(colored(f"Failed to process {target}: {error}", "red"))
            failed = True
    if failed:
        raise KillError("Some kill operations failed")