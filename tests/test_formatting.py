import pytest

from winix.formatting import format_memory


@pytest.mark.parametrize("count", [0, 1, 512, 1023])
def test_small_counts_are_plain_bytes(count):
    assert format_memory(count) == f"{count} bytes"


def test_exact_kilobyte():
    assert format_memory(1024) == "1.00 KB"


def test_exact_megabyte():
    assert format_memory(1024 * 1024) == "1.00 MB"


def test_exact_gigabyte():
    assert format_memory(1024 * 1024 * 1024) == "1.00 GB"


@pytest.mark.parametrize(
    "count, suffix",
    [
        (2048, " KB"),
        (1024 * 1024 - 1, " KB"),
        (5 * 1024 * 1024, " MB"),
        (1024 * 1024 * 1024 - 1, " MB"),
        (3 * 1024 * 1024 * 1024, " GB"),
    ],
)
def test_unit_boundaries(count, suffix):
    assert format_memory(count).endswith(suffix)


def test_gigabytes_do_not_roll_over_to_larger_unit():
    result = format_memory(4096 * 1024 * 1024 * 1024)
    assert result.endswith(" GB")
    assert float(result.split()[0]) == 4096.0