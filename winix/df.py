"""The df command: report disk space usage."""

from __future__ import annotations

import psutil

from winix.formatting import format_memory

_ROW = "{:<20} {:<15} {:<15} {:<15}"


def execute() -> None:
    """Print total, available and used space for every mounted disk."""
    print(_ROW.format("Disk", "Total", "Available", "Used"))
    print("-" * 65)
    for partition in psutil.disk_partitions(all=False):
        try:
            usage = psutil.disk_usage(partition.mountpoint)
        except OSError:
            continue
        total = usage.total
        available = usage.free
        print(
            _ROW.format(
                f'"{partition.device}"',
                format_memory(total),
                format_memory(available),
                format_memory(total - available),
            )
        )