"""Unit conversion helpers shared by both reports.

Conversions are chained: each step floors the previous result, never the
original value, so KB -> MB -> GB matches the SQL Server reports exactly.
"""

from __future__ import annotations

PAGE_SIZE_KB = 8
UNIT_FACTOR = 1024


def chained_units(value: int, steps: int) -> tuple[int, ...]:
    """Floor-divide ``value`` by 1024 ``steps`` times, keeping each result.

    Args:
        value: Starting quantity (bytes or KB).
        steps: Number of successive divisions.

    Returns:
        Tuple of ``steps`` integers, one per unit.
    """
    results: list[int] = []
    current = value
    for _ in range(steps):
        current = current // UNIT_FACTOR
        results.append(current)
    return tuple(results)


def bytes_to_units(total_bytes: int) -> tuple[int, int, int]:
    """Return ``(kb, mb, gb)`` for a byte count."""
    kb, mb, gb = chained_units(total_bytes, 3)
    return kb, mb, gb


def pages_to_units(page_count: int) -> tuple[int, int, int]:
    """Return ``(kb, mb, gb)`` for a count of 8 KB data pages."""
    kb = page_count * PAGE_SIZE_KB
    mb, gb = chained_units(kb, 2)
    return kb, mb, gb
