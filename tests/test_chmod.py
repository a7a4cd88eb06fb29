import os
import stat

import pytest

from winix.chmod import (
    ChmodError,
    FilePermissions,
    apply_mode,
    execute,
    symbolic_to_octal,
)


def _mode(path):
    return stat.S_IMODE(os.stat(path).st_mode)


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "myfile.txt"
    path.write_text("data")
    return str(path)


def test_octal_mode_applied(sample):
    apply_mode(sample, "755")
    assert _mode(sample) == 0o755


def test_four_digit_octal_ignores_leading_digit(sample):
    apply_mode(sample, "0644")
    assert _mode(sample) == 0o644


@pytest.mark.parametrize("mode", ["8", "12345", "", "778"])
def test_invalid_octal_rejected(sample, mode):
    with pytest.raises(ChmodError, match="Invalid mode"):
        apply_mode(sample, mode)


def test_short_octal_rejected(sample):
    with pytest.raises(ChmodError, match="at least 3 digits"):
        apply_mode(sample, "75")


def test_symbolic_matches_equivalent_octal(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_text("")
    second.write_text("")
    apply_mode(str(first), "u=rwx,g=rx,o=r")
    apply_mode(str(second), "754")
    assert _mode(first) == _mode(second)


def test_symbolic_add_keeps_existing_bits(sample):
    apply_mode(sample, "644")
    apply_mode(sample, "u+x")
    assert _mode(sample) == 0o644 | stat.S_IXUSR


def test_symbolic_remove_bits(sample):
    apply_mode(sample, "777")
    apply_mode(sample, "g-w,o-w")
    assert _mode(sample) == 0o777 & ~(stat.S_IWGRP | stat.S_IWOTH)


def test_default_who_is_all(sample):
    apply_mode(sample, "600")
    apply_mode(sample, "=r")
    assert _mode(sample) == stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH


def test_symbolic_to_octal_does_not_change_file(sample):
    apply_mode(sample, "600")
    result = symbolic_to_octal(sample, "a+r")
    assert _mode(sample) == 0o600
    assert int(result, 8) == 0o600 | stat.S_IRGRP | stat.S_IROTH


def test_capital_x_only_on_directories(tmp_path, sample):
    directory = tmp_path / "dir"
    directory.mkdir()
    os.chmod(directory, 0o600)
    os.chmod(sample, 0o600)
    dir_result = symbolic_to_octal(str(directory), "u+X")
    file_result = symbolic_to_octal(sample, "u+X")
    assert int(dir_result, 8) == 0o700
    assert int(file_result, 8) == 0o600


@pytest.mark.parametrize(
    ("mode", "message"),
    [
        ("u", "missing operation"),
        ("u*r", "Invalid operation"),
        ("u+q", "Invalid permission character: 'q'"),
        ("u+g", "Invalid permission: g for owner"),
        ("u+x,,g+w", "Empty expression"),
    ],
)
def test_symbolic_errors(sample, mode, message):
    with pytest.raises(ChmodError, match=message):
        apply_mode(sample, mode)


def test_permissions_default_is_zero():
    assert FilePermissions().to_octal() == "000"


def test_permissions_add_remove_round_trip(sample):
    perms = FilePermissions.from_mode(0o640)
    before = perms.to_octal()
    perms.add("other", "x", sample)
    assert perms.to_octal() != before
    perms.remove("other", "x")
    assert perms.to_octal() == before


def test_permissions_clear_only_target():
    perms = FilePermissions.from_mode(0o777)
    perms.clear("group")
    assert perms.group == 0
    assert perms.owner == perms.other == 7


def test_permissions_from_mode_round_trip():
    assert int(FilePermissions.from_mode(0o751).to_octal(), 8) == 0o751


def test_sticky_and_setuid_are_ignored(sample):
    perms = FilePermissions.from_mode(0o644)
    perms.add("owner", "s", sample)
    perms.remove("other", "t")
    assert int(perms.to_octal(), 8) == 0o644


def test_execute_reports_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "nope")
    execute(["755", missing])
    out = capsys.readouterr().out
    assert f"chmod: cannot access '{missing}': No such file or directory" in out


def test_execute_applies_and_reports(sample, capsys):
    execute(["700", sample])
    assert _mode(sample) == 0o700
    assert f"Permissions changed for '{sample}'" in capsys.readouterr().out


def test_execute_reports_error(sample, capsys):
    execute(["u+q", sample])
    assert "chmod: Invalid permission character" in capsys.readouterr().out


def test_execute_usage(capsys):
    execute(["755"])
    assert "Usage: chmod" in capsys.readouterr().out