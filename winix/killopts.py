"""Command-line options of the kill command and how signals map to actions."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

_U64_MAX = 2**64 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")


class KillError(Exception):
    """Raised when kill arguments are invalid or a kill operation fails."""


class KillMethod(Enum):
    """How a process is asked or forced to stop."""

    FORCE_TERMINATE = "force_terminate"
    GRACEFUL_CTRL_C = "graceful_ctrl_c"
    GRACEFUL_CTRL_BREAK = "graceful_ctrl_break"
    WINDOW_CLOSE = "window_close"


_SIGNAL_METHODS = {
    "KILL": KillMethod.FORCE_TERMINATE,
    "9": KillMethod.FORCE_TERMINATE,
    "TERM": KillMethod.GRACEFUL_CTRL_C,
    "15": KillMethod.GRACEFUL_CTRL_C,
    "INT": KillMethod.GRACEFUL_CTRL_C,
    "2": KillMethod.GRACEFUL_CTRL_C,
    "QUIT": KillMethod.GRACEFUL_CTRL_BREAK,
    "3": KillMethod.GRACEFUL_CTRL_BREAK,
}


@dataclass
class KillOptions:
    """Parsed arguments of a kill invocation."""

    signal: str | None = None
    signal_explicit: str | None = None
    print_only: bool = False
    queue_value: int | None = None
    all_processes: bool = False
    timeout_ms: int | None = None
    timeout_signal: str | None = None
    end_of_options: bool = False
    targets: list[str] = field(default_factory=list)


def _is_numeric(text: str) -> bool:
    """Return whether every character is an ASCII digit (true for empty text)."""
    return all(c in "0123456789" for c in text)


def _parse_u64(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U64_MAX else None


def _parse_i32(text: str) -> int | None:
    if not _SIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if _I32_MIN <= value <= _I32_MAX else None


def _next_value(remaining: Iterator[str], message: str) -> str:
    try:
        return next(remaining)
    except StopIteration:
        raise KillError(message) from None


def is_valid_signal_name(signal: str) -> bool:
    """Return whether ``signal`` names a supported signal, in any case."""
    return signal.upper() in _SIGNAL_METHODS


def signal_to_method(signal: str) -> KillMethod:
    """Map a signal name or number to the way it is delivered."""
    try:
        return _SIGNAL_METHODS[signal.upper()]
    except KeyError:
        raise KillError(
            f"Signal '{signal}' is not supported. "
            "Supported signals: TERM(15), INT(2), QUIT(3), KILL(9)"
        ) from None


def _parse_timeout(arg: str, remaining: Iterator[str], options: KillOptions) -> None:
    if "=" in arg:
        value = arg.split("=", 1)[1]
        timeout = _parse_u64(value)
        if timeout is None:
            raise KillError(f"Invalid timeout value: {value}")
        options.timeout_ms = timeout
        return

    value = _next_value(remaining, "Option --timeout requires milliseconds argument")
    timeout = _parse_u64(value)
    if timeout is None:
        raise KillError(f"Invalid timeout value: {value}")
    options.timeout_ms = timeout
    options.timeout_signal = _next_value(remaining, "Option --timeout requires a signal argument")


def parse_arguments(args: Sequence[str]) -> KillOptions:
    """Parse kill arguments into :class:`KillOptions`."""
    options = KillOptions()
    remaining = iter(args)
    for arg in remaining:
        if options.end_of_options:
            options.targets.append(arg)
        elif arg == "--":
            options.end_of_options = True
        elif arg == "-p":
            options.print_only = True
        elif arg == "-a":
            options.all_processes = True
        elif arg == "-s":
            options.signal_explicit = _next_value(
                remaining, "Option -s requires a signal argument"
            )
        elif arg == "-q":
            value = _next_value(remaining, "Option -q requires a value argument")
            queue_value = _parse_i32(value)
            if queue_value is None:
                raise KillError(f"Invalid queue value: {value}")
            options.queue_value = queue_value
        elif arg.startswith("--timeout"):
            _parse_timeout(arg, remaining, options)
        elif arg.startswith("-") and len(arg) > 1:
            signal = arg[1:]
            if _is_numeric(signal) or is_valid_signal_name(signal):
                options.signal = signal
            else:
                raise KillError(f"Invalid signal: -{signal}")
        else:
            options.targets.append(arg)
    return options


def validate_options(options: KillOptions) -> None:
    """Raise :class:`KillError` if the options do not form a valid request."""
    if not options.targets and not options.print_only:
        raise KillError("No process ID or name specified")

    if options.signal is not None and options.signal_explicit is not None:
        raise KillError("Cannot specify signal with both -signal and -s options")

    signal = options.signal if options.signal is not None else options.signal_explicit
    if signal is not None:
        signal_to_method(signal)

    if options.all_processes and any(_is_numeric(t) for t in options.targets):
        raise KillError("Cannot use -a flag with numeric PIDs")

    if options.timeout_ms is not None and options.timeout_signal is None:
        raise KillError("--timeout option requires a signal")

    if options.timeout_signal is not None:
        signal_to_method(options.timeout_signal)