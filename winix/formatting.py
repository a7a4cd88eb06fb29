"""Human-readable rendering of byte counts."""

from __future__ import annotations

_KIB = 1024.0
_MIB = 1024.0 * 1024.0
_GIB = 1024.0 * 1024.0 * 1024.0


def format_memory(num_bytes: int) -> str:
    """Render a byte count in GB, MB or KB with two decimals, or as plain bytes."""
    gb = num_bytes / _GIB
    mb = num_bytes / _MIB
    kb = num_bytes / _KIB
    if gb >= 1.0:
        return f"{gb:.2f} GB"
    if mb >= 1.0:
        return f"{mb:.2f} MB"
    if kb >= 1.0:
        return f"{kb:.2f} KB"
    return f"{num_bytes} bytes"