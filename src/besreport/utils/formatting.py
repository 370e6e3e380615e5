"""Output formatting helpers for besreport."""

from __future__ import annotations

from besreport.utils.units import UNIT_FACTOR

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_bytes(num_bytes: int | None) -> str:
    """Format a byte count in the largest unit that keeps it at or above 1.

    Plain bytes and kilobytes are shown as whole numbers, larger units with
    one decimal, e.g. '700 B', '7 KB', '5.0 MB', '2.0 GB'.
    """
    if num_bytes is None:
        return "N/A"
    value = float(num_bytes)
    unit = 0
    while value >= UNIT_FACTOR and unit < len(_SIZE_UNITS) - 1:
        value /= UNIT_FACTOR
        unit += 1
    if unit <= 1:
        return f"{int(value):,} {_SIZE_UNITS[unit]}"
    return f"{value:,.1f} {_SIZE_UNITS[unit]}"


def format_kb(kb: int | None) -> str:
    """Format a size reported in KB, such as SQL Server page space."""
    if kb is None:
        return "N/A"
    return format_bytes(kb * UNIT_FACTOR)


def format_count(count: int | None) -> str:
    """Abbreviate large record counts: '9.0M', '12.0K', '300'."""
    if count is None:
        return "N/A"
    for threshold, suffix in ((1_000_000, "M"), (1_000, "K")):
        if count >= threshold:
            return f"{count / threshold:.1f}{suffix}"
    return f"{count:,}"


def format_percentage(value: float | None) -> str:
    """Format a percentage with two decimals, e.g. '30.00%'."""
    if value is None:
        return "N/A"
    return f"{value:.2f}%"


def status_color(status: str) -> str:
    """Return Rich color name for a fragmentation status."""
    colors = {
        "HIGH": "bold red",
        "MODERATE": "yellow",
        "LOW": "green",
    }
    return colors.get(status.upper(), "white")


def shorten_name(name: str, width: int = 40) -> str:
    """Cut long object names to ``width`` characters, ending in '...'."""
    return name if len(name) <= width else name[: width - 3] + "..."
