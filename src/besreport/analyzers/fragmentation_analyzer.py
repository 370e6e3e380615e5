"""Space usage and fragmentation status for every index."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from besreport.exceptions import InvalidArgumentError
from besreport.models import (
    FragmentationReportRow,
    FragmentationStatus,
    FragmentationSummary,
    IndexStat,
)
from besreport.utils.units import pages_to_units

logger = logging.getLogger(__name__)

HIGH_THRESHOLD = 30.0
MODERATE_THRESHOLD = 10.0

_ACTIONS = {
    FragmentationStatus.HIGH: "REBUILD",
    FragmentationStatus.MODERATE: "REORGANIZE",
    FragmentationStatus.LOW: "NONE",
}


def classify_fragmentation(percent: float | None) -> FragmentationStatus:
    """Map a fragmentation percentage to its severity band.

    Lower bounds are inclusive: exactly 30 is High, exactly 10 is Moderate.
    Unmeasured (None) indexes are Low.
    """
    value = percent or 0.0
    if value >= HIGH_THRESHOLD:
        return FragmentationStatus.HIGH
    if value >= MODERATE_THRESHOLD:
        return FragmentationStatus.MODERATE
    return FragmentationStatus.LOW


def recommended_action(status: FragmentationStatus) -> str:
    """Return the usual index maintenance action for a status."""
    return _ACTIONS[status]


def _validate_stat(stat: IndexStat) -> None:
    label = f"{stat.table_name}.{stat.index_name or '(heap)'}"
    if stat.page_count < 0:
        raise InvalidArgumentError(f"page_count must be non-negative for {label}")
    if stat.record_count < 0:
        raise InvalidArgumentError(f"record_count must be non-negative for {label}")
    pct = stat.fragmentation_percent
    if pct is not None and not (0.0 <= pct <= 100.0):
        raise InvalidArgumentError(
            f"fragmentation_percent must be between 0 and 100 for {label}, got {pct}"
        )


def compute_fragmentation_report(stats: Sequence[IndexStat]) -> list[FragmentationReportRow]:
    """Annotate every index with space usage and a fragmentation status.

    Args:
        stats: Physical statistics, one per index allocation unit.

    Returns:
        One row per input stat, sorted by fragmentation descending, then
        space used in MB descending, then input order.

    Raises:
        InvalidArgumentError: If a page or record count is negative.
    """
    logger.info("Starting fragmentation report over %d indexes", len(stats))

    rows: list[FragmentationReportRow] = []
    for stat in stats:
        _validate_stat(stat)
        kb, mb, gb = pages_to_units(stat.page_count)
        rows.append(
            FragmentationReportRow(
                table_name=stat.table_name,
                index_name=stat.index_name,
                index_type=stat.index_type,
                allocation_type=stat.allocation_type,
                page_count=stat.page_count,
                record_count=stat.record_count,
                fragmentation_percent=stat.fragmentation_percent,
                space_used_kb=kb,
                space_used_mb=mb,
                space_used_gb=gb,
                fragmentation_status=classify_fragmentation(stat.fragmentation_percent),
            )
        )

    rows.sort(key=lambda r: (r.fragmentation_percent or 0.0, r.space_used_mb), reverse=True)

    logger.info("Fragmentation report complete: %d indexes", len(rows))
    return rows


def summarize_fragmentation(rows: Sequence[FragmentationReportRow]) -> FragmentationSummary:
    """Count indexes per status and total their space."""
    counts = {status: 0 for status in FragmentationStatus}
    for row in rows:
        counts[row.fragmentation_status] += 1

    return FragmentationSummary(
        total_indexes=len(rows),
        high=counts[FragmentationStatus.HIGH],
        moderate=counts[FragmentationStatus.MODERATE],
        low=counts[FragmentationStatus.LOW],
        total_space_kb=sum(row.space_used_kb for row in rows),
    )
