"""besreport — BigFix database diagnostics reports.

Ranks the largest properties stored across the BigFix property result
tables and reports fragmentation and space usage for every index. The
computations are pure functions over plain data; rows may come from any
database layer or from exported JSON/CSV files.
"""

from __future__ import annotations

__version__ = "1.0.0"

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from besreport.analyzers.fragmentation_analyzer import (
    classify_fragmentation,
    compute_fragmentation_report,
    summarize_fragmentation,
)
from besreport.analyzers.size_analyzer import aggregate_property_sizes, compute_size_report
from besreport.config import ReportConfig
from besreport.exceptions import (
    DivisionByZeroError,
    EmptyInputError,
    InvalidArgumentError,
    ReportError,
)
from besreport.models import (
    FragmentationReportRow,
    FragmentationStatus,
    FragmentationSummary,
    IndexStat,
    PropertyAggregate,
    SizeRecord,
    SizeReportRow,
    SourceTable,
)

logger = logging.getLogger(__name__)


@dataclass
class DiagnosticsReport:
    """Results of one diagnostics run, ready for the reporters."""

    database: str = ""
    top_n: int = 20
    size_rows: list[SizeReportRow] = field(default_factory=list)
    fragmentation_rows: list[FragmentationReportRow] = field(default_factory=list)
    fragmentation_summary: FragmentationSummary = field(default_factory=FragmentationSummary)


def run_diagnostics(
    size_records: Sequence[SizeRecord] | None = None,
    index_stats: Sequence[IndexStat] | None = None,
    config: ReportConfig | None = None,
    database: str = "",
) -> DiagnosticsReport:
    """Run the size and/or fragmentation reports.

    Sections whose input is None are left empty.

    Raises:
        InvalidArgumentError: If the config or any input is invalid.
        DivisionByZeroError: If the size records total zero bytes.
    """
    config = config or ReportConfig()
    if config.top_n < 1:
        raise InvalidArgumentError(f"top_n must be at least 1, got {config.top_n}")

    report = DiagnosticsReport(database=database, top_n=config.top_n)

    if size_records is not None:
        report.size_rows = compute_size_report(size_records, config.top_n)

    if index_stats is not None:
        report.fragmentation_rows = compute_fragmentation_report(index_stats)
        report.fragmentation_summary = summarize_fragmentation(report.fragmentation_rows)

    logger.info(
        "Diagnostics complete: %d size rows, %d index rows",
        len(report.size_rows),
        len(report.fragmentation_rows),
    )
    return report


__all__ = [
    "DiagnosticsReport",
    "DivisionByZeroError",
    "EmptyInputError",
    "FragmentationReportRow",
    "FragmentationStatus",
    "FragmentationSummary",
    "IndexStat",
    "InvalidArgumentError",
    "PropertyAggregate",
    "ReportConfig",
    "ReportError",
    "SizeRecord",
    "SizeReportRow",
    "SourceTable",
    "__version__",
    "aggregate_property_sizes",
    "classify_fragmentation",
    "compute_fragmentation_report",
    "compute_size_report",
    "run_diagnostics",
]
