"""Human-readable formatting helpers."""

from __future__ import annotations

_SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def humanize_size(size: int | float) -> str:
    """Format a byte count with binary units, e.g. ``1.5 GiB``.

    Args:
        size: Number of bytes

    Returns:
        Formatted size string.
    """
    value = float(size)
    for unit in _SIZE_UNITS[:-1]:
        if abs(value) < 1024:
            return f"{value:.0f} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} {_SIZE_UNITS[-1]}"
