"""Load exported query results from JSON or CSV files."""

from __future__ import annotations

import csv
import json
import logging
import os
from typing import Any

from besreport.exceptions import InvalidArgumentError
from besreport.models import IndexStat, SizeRecord
from besreport.sources.rows import index_stats_from_rows, size_records_from_rows

logger = logging.getLogger(__name__)


def load_rows(path: str) -> list[dict[str, Any]]:
    """Read rows from a ``.json`` (list of objects) or ``.csv`` file.

    Empty CSV cells become None. A leading UTF-8 byte-order mark, as written
    by SSMS and Excel exports, is ignored.

    Raises:
        InvalidArgumentError: For unsupported suffixes, undecodable text,
            malformed JSON or malformed CSV.
    """
    suffix = os.path.splitext(path)[1].lower()
    if suffix not in (".json", ".csv"):
        raise InvalidArgumentError(f"Unsupported file type {suffix or '(none)'!r}: {path}")

    logger.info("Loading rows from %s", path)
    try:
        with open(path, encoding="utf-8-sig", newline="") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                return [
                    {k: (v if v != "" else None) for k, v in row.items()}
                    for row in csv.DictReader(f)
                ]
    except UnicodeDecodeError as exc:
        raise InvalidArgumentError(f"{path}: not valid UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InvalidArgumentError(f"{path}: invalid JSON: {exc}") from exc
    except csv.Error as exc:
        raise InvalidArgumentError(f"{path}: invalid CSV: {exc}") from exc

    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise InvalidArgumentError(f"{path}: expected a JSON list of objects")
    return data


def load_size_records(path: str) -> list[SizeRecord]:
    """Load SizeRecords from an exported property sizes file."""
    return size_records_from_rows(load_rows(path))


def load_index_stats(path: str) -> list[IndexStat]:
    """Load IndexStats from an exported index stats file."""
    return index_stats_from_rows(load_rows(path))
