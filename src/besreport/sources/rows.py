"""Adapters from database-style dict rows to report input models."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from besreport.exceptions import InvalidArgumentError
from besreport.models import IndexStat, SizeRecord

logger = logging.getLogger(__name__)


def _normalize(row: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).strip().lower(): v for k, v in row.items()}


def _empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _require(row: dict[str, Any], key: str, index: int) -> Any:
    value = row.get(key)
    if _empty(value):
        raise InvalidArgumentError(f"Row {index}: missing required column {key!r}")
    return value


def _to_int(value: Any, key: str, index: int) -> int:
    # JSON numbers and CSV text follow the same rule: 12 and 12.0 are
    # accepted, 12.9 is rejected rather than truncated.
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Row {index}: {key!r} is not an integer: {value!r}")
    if isinstance(value, int):
        return value
    try:
        if isinstance(value, str):
            value = value.strip()
            if value.lstrip("+-").isdigit():
                return int(value)
        number = float(value) if isinstance(value, str) else value
        if number != int(number):
            raise ValueError(value)
        return int(number)
    except (TypeError, ValueError, OverflowError):
        raise InvalidArgumentError(f"Row {index}: {key!r} is not an integer: {value!r}") from None


def _optional_int(row: dict[str, Any], key: str, index: int) -> int | None:
    value = row.get(key)
    if _empty(value):
        return None
    return _to_int(value, key, index)


def _optional_float(row: dict[str, Any], key: str, index: int) -> float | None:
    value = row.get(key)
    if _empty(value):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Row {index}: {key!r} is not a number: {value!r}") from None


def size_records_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[SizeRecord]:
    """Build SizeRecords from rows of the property sizes query.

    Column names are matched case-insensitively. ``computer_id`` is optional.
    """
    records: list[SizeRecord] = []
    for index, raw in enumerate(rows):
        row = _normalize(raw)
        records.append(
            SizeRecord(
                site_id=_to_int(_require(row, "site_id", index), "site_id", index),
                analysis_id=_to_int(_require(row, "analysis_id", index), "analysis_id", index),
                property_id=_to_int(_require(row, "property_id", index), "property_id", index),
                computer_id=_optional_int(row, "computer_id", index) or 0,
                primary_bytes=_optional_int(row, "primary_bytes", index),
                overflow_bytes=_optional_int(row, "overflow_bytes", index),
            )
        )
    logger.debug("Loaded %d size records", len(records))
    return records


def index_stats_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[IndexStat]:
    """Build IndexStats from rows of the index stats query.

    A NULL ``record_count`` (LIMITED scan mode) is read as 0.
    """
    stats: list[IndexStat] = []
    for index, raw in enumerate(rows):
        row = _normalize(raw)
        stats.append(
            IndexStat(
                table_name=str(_require(row, "table_name", index)),
                index_name=str(row.get("index_name") or ""),
                index_type=str(row.get("index_type") or ""),
                allocation_type=str(row.get("allocation_type") or ""),
                page_count=_to_int(_require(row, "page_count", index), "page_count", index),
                record_count=_optional_int(row, "record_count", index) or 0,
                fragmentation_percent=_optional_float(row, "fragmentation_percent", index),
            )
        )
    logger.debug("Loaded %d index stats", len(stats))
    return stats
