import pytest

from winix.killopts import (
    KillError,
    KillMethod,
    KillOptions,
    is_valid_signal_name,
    parse_arguments,
    signal_to_method,
    validate_options,
)


def test_plain_targets_use_defaults():
    options = parse_arguments(["1234", "notepad"])
    assert options.targets == ["1234", "notepad"]
    assert options.signal is None
    assert options.signal_explicit is None
    assert not options.print_only
    assert not options.all_processes
    assert options.timeout_ms is None


def test_numeric_signal():
    options = parse_arguments(["-9", "1234"])
    assert options.signal == "9"
    assert options.targets == ["1234"]


def test_named_signal_keeps_case():
    options = parse_arguments(["-term", "1234"])
    assert options.signal == "term"


def test_explicit_signal_flag():
    options = parse_arguments(["-s", "KILL", "1234"])
    assert options.signal_explicit == "KILL"
    assert options.signal is None


def test_flags():
    options = parse_arguments(["-p", "-a", "notepad"])
    assert options.print_only
    assert options.all_processes
    assert options.targets == ["notepad"]


def test_queue_value():
    options = parse_arguments(["-q", "-7", "1234"])
    assert options.queue_value == -7


def test_invalid_queue_value():
    with pytest.raises(KillError, match="Invalid queue value: abc"):
        parse_arguments(["-q", "abc", "1234"])


def test_queue_value_out_of_range():
    with pytest.raises(KillError, match="Invalid queue value"):
        parse_arguments(["-q", str(2**31), "1234"])


def test_timeout_with_signal():
    options = parse_arguments(["--timeout", "5000", "KILL", "1234"])
    assert options.timeout_ms == 5000
    assert options.timeout_signal == "KILL"
    assert options.targets == ["1234"]


def test_timeout_with_equals_has_no_signal():
    options = parse_arguments(["--timeout=5000", "1234"])
    assert options.timeout_ms == 5000
    assert options.timeout_signal is None
    with pytest.raises(KillError, match="--timeout option requires a signal"):
        validate_options(options)


def test_invalid_timeout_value():
    with pytest.raises(KillError, match="Invalid timeout value: soon"):
        parse_arguments(["--timeout", "soon", "KILL", "1"])


def test_timeout_missing_arguments():
    with pytest.raises(KillError, match="requires milliseconds argument"):
        parse_arguments(["--timeout"])
    with pytest.raises(KillError, match="requires a signal argument"):
        parse_arguments(["--timeout", "100"])


def test_end_of_options_makes_everything_a_target():
    options = parse_arguments(["--", "-9", "-p"])
    assert options.end_of_options
    assert options.targets == ["-9", "-p"]
    assert options.signal is None
    assert not options.print_only


def test_lone_dash_is_target():
    assert parse_arguments(["-"]).targets == ["-"]


def test_invalid_signal():
    with pytest.raises(KillError, match="Invalid signal: -HUP"):
        parse_arguments(["-HUP", "1234"])


def test_missing_signal_for_s():
    with pytest.raises(KillError, match="Option -s requires a signal argument"):
        parse_arguments(["-s"])


def test_missing_value_for_q():
    with pytest.raises(KillError, match="Option -q requires a value argument"):
        parse_arguments(["-q"])


@pytest.mark.parametrize(
    "signal, method",
    [
        ("KILL", KillMethod.FORCE_TERMINATE),
        ("9", KillMethod.FORCE_TERMINATE),
        ("TERM", KillMethod.GRACEFUL_CTRL_C),
        ("15", KillMethod.GRACEFUL_CTRL_C),
        ("int", KillMethod.GRACEFUL_CTRL_C),
        ("2", KillMethod.GRACEFUL_CTRL_C),
        ("Quit", KillMethod.GRACEFUL_CTRL_BREAK),
        ("3", KillMethod.GRACEFUL_CTRL_BREAK),
    ],
)
def test_signal_to_method(signal, method):
    assert signal_to_method(signal) is method
    assert is_valid_signal_name(signal)


def test_unsupported_signal():
    with pytest.raises(KillError, match="Signal '1' is not supported"):
        signal_to_method("1")
    assert not is_valid_signal_name("HUP")


def test_validate_requires_target():
    with pytest.raises(KillError, match="No process ID or name specified"):
        validate_options(KillOptions())


def test_validate_print_only_without_targets():
    options = parse_arguments(["-p"])
    validate_options(options)
    assert options.targets == []


def test_validate_rejects_both_signal_forms():
    options = parse_arguments(["-9", "-s", "TERM", "1234"])
    with pytest.raises(KillError, match="both -signal and -s"):
        validate_options(options)


def test_validate_rejects_unsupported_numeric_signal():
    options = parse_arguments(["-1", "1234"])
    assert options.signal == "1"
    with pytest.raises(KillError, match="not supported"):
        validate_options(options)


def test_validate_rejects_all_with_pid():
    options = parse_arguments(["-a", "1234"])
    with pytest.raises(KillError, match="Cannot use -a flag with numeric PIDs"):
        validate_options(options)


def test_validate_rejects_bad_timeout_signal():
    options = parse_arguments(["--timeout", "10", "HUP", "1234"])
    with pytest.raises(KillError, match="not supported"):
        validate_options(options)


def test_validate_accepts_full_request():
    options = parse_arguments(["-a", "-TERM", "--timeout", "10", "KILL", "notepad"])
    validate_options(options)
    assert signal_to_method(options.signal) is KillMethod.GRACEFUL_CTRL_C
    assert signal_to_method(options.timeout_signal) is KillMethod.FORCE_TERMINATE