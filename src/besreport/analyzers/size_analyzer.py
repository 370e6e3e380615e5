"""Ranking of the largest properties across the property result tables."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from besreport.exceptions import DivisionByZeroError, EmptyInputError, InvalidArgumentError
from besreport.models import PropertyAggregate, SizeRecord, SizeReportRow, SourceTable
from besreport.utils.units import bytes_to_units

logger = logging.getLogger(__name__)

GroupKey = tuple[int, int, int, SourceTable]


def _validate_record(record: SizeRecord) -> None:
    for name in ("primary_bytes", "overflow_bytes"):
        value = getattr(record, name)
        if value is not None and value < 0:
            raise InvalidArgumentError(
                f"{name} must be non-negative, got {value} for "
                f"site {record.site_id} analysis {record.analysis_id} "
                f"property {record.property_id}"
            )


def aggregate_property_sizes(records: Sequence[SizeRecord]) -> list[PropertyAggregate]:
    """Sum record sizes per (site, analysis, property, source table).

    Args:
        records: Raw size facts.

    Returns:
        One aggregate per distinct key, in first-encounter order.

    Raises:
        InvalidArgumentError: If any record carries a negative size.
    """
    totals: dict[GroupKey, int] = {}
    for record in records:
        _validate_record(record)
        key = (record.site_id, record.analysis_id, record.property_id, record.source_table)
        totals[key] = totals.get(key, 0) + record.size_bytes

    return [
        PropertyAggregate(
            site_id=site_id,
            analysis_id=analysis_id,
            property_id=property_id,
            source_table=source_table,
            total_bytes=total,
        )
        for (site_id, analysis_id, property_id, source_table), total in totals.items()
    ]


def compute_size_report(records: Sequence[SizeRecord], top_n: int = 20) -> list[SizeReportRow]:
    """Rank properties by total stored bytes.

    Args:
        records: Raw size facts.
        top_n: Maximum number of rows to return.

    Returns:
        Up to ``top_n`` rows sorted by total bytes descending. Equal sizes keep
        the order in which their group was first seen.

    Raises:
        InvalidArgumentError: If ``top_n`` < 1 or a size is negative.
        EmptyInputError: If ``records`` is empty.
        DivisionByZeroError: If every record has zero bytes.
    """
    if top_n < 1:
        raise InvalidArgumentError(f"top_n must be at least 1, got {top_n}")

    logger.info("Starting size report over %d records", len(records))

    if not records:
        raise EmptyInputError("Cannot compute size percentages over an empty record set")

    groups = aggregate_property_sizes(records)
    grand_total = sum(group.total_bytes for group in groups)
    if grand_total == 0:
        raise DivisionByZeroError(
            f"Grand total of {len(groups)} property groups is 0 bytes; "
            "percentages are undefined"
        )

    ranked = sorted(groups, key=lambda g: g.total_bytes, reverse=True)[:top_n]

    rows: list[SizeReportRow] = []
    for group in ranked:
        kb, mb, gb = bytes_to_units(group.total_bytes)
        rows.append(
            SizeReportRow(
                site_id=group.site_id,
                analysis_id=group.analysis_id,
                property_id=group.property_id,
                source_table=group.source_table,
                total_bytes=group.total_bytes,
                data_size_kb=kb,
                data_size_mb=mb,
                data_size_gb=gb,
                data_size_percentage=round(group.total_bytes / grand_total * 100, 2),
            )
        )
        logger.debug(
            "Property %d/%d/%d (%s): %d bytes",
            group.site_id,
            group.analysis_id,
            group.property_id,
            group.source_table.value,
            group.total_bytes,
        )

    logger.info(
        "Size report complete: %d of %d groups, %d bytes total",
        len(rows),
        len(groups),
        grand_total,
    )
    return rows
