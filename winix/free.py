"""The free command: report memory and swap usage."""

from __future__ import annotations

import psutil

from winix.formatting import format_memory


def execute() -> None:
    """Print used and total memory and swap."""
    memory = psutil.virtual_memory()
    swap = psutil.swap_memory()
    used_memory = memory.total - memory.available
    print(f"Used memory : {format_memory(used_memory)}")
    print(f"Total memory: {format_memory(memory.total)}")
    print(f"Total swap  : {format_memory(swap.total)}")
    print(f"Used swap   : {format_memory(swap.used)}")