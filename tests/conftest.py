"""Shared test fixtures with exported query rows from a fictional BFEnterprise database."""

from __future__ import annotations

import pytest

from besreport import DiagnosticsReport, ReportConfig, run_diagnostics
from besreport.models import IndexStat, SizeRecord
from besreport.sources.rows import index_stats_from_rows, size_records_from_rows


@pytest.fixture
def size_records() -> list[SizeRecord]:
    """Size facts covering both source tables, a tie and a both-null record."""
    return size_records_from_rows(MOCK_PROPERTY_SIZE_ROWS)


@pytest.fixture
def index_stats() -> list[IndexStat]:
    """Index statistics spanning every fragmentation band."""
    return index_stats_from_rows(MOCK_INDEX_STAT_ROWS)


@pytest.fixture
def sample_report(size_records: list[SizeRecord], index_stats: list[IndexStat]) -> DiagnosticsReport:
    """Pre-built DiagnosticsReport for testing reporters."""
    return run_diagnostics(
        size_records=size_records,
        index_stats=index_stats,
        config=ReportConfig(top_n=20),
        database="BFEnterprise",
    )


# ── Mock Data ────────────────────────────────────────────────────────

# Groups by (site, analysis, property, source):
#   (1, 10, 1, PRIMARY)   1000
#   (1, 10, 2, OVERFLOW)  8000
#   (2, 20, 1, PRIMARY)   1000
#   (1, 10, 1, OVERFLOW)  2000
#   (3, 5, 7, PRIMARY)       0
# Grand total 12000 bytes.
MOCK_PROPERTY_SIZE_ROWS = [
    {
        "site_id": 1,
        "analysis_id": 10,
        "property_id": 1,
        "computer_id": 100,
        "primary_bytes": 400,
        "overflow_bytes": None,
    },
    {
        "site_id": 1,
        "analysis_id": 10,
        "property_id": 1,
        "computer_id": 101,
        "primary_bytes": 600,
        "overflow_bytes": None,
    },
    {
        "site_id": 1,
        "analysis_id": 10,
        "property_id": 2,
        "computer_id": 100,
        "primary_bytes": None,
        "overflow_bytes": 5000,
    },
    {
        "site_id": 1,
        "analysis_id": 10,
        "property_id": 2,
        "computer_id": 101,
        "primary_bytes": None,
        "overflow_bytes": 3000,
    },
    {
        "site_id": 2,
        "analysis_id": 20,
        "property_id": 1,
        "computer_id": 100,
        "primary_bytes": 1000,
        "overflow_bytes": None,
    },
    {
        "site_id": 1,
        "analysis_id": 10,
        "property_id": 1,
        "computer_id": 102,
        "primary_bytes": None,
        "overflow_bytes": 2000,
    },
    {
        "site_id": 3,
        "analysis_id": 5,
        "property_id": 7,
        "computer_id": 100,
        "primary_bytes": None,
        "overflow_bytes": None,
    },
]

MOCK_INDEX_STAT_ROWS = [
    {
        "table_name": "COMPUTERS",
        "index_name": "PK_COMPUTERS",
        "index_type": "CLUSTERED INDEX",
        "allocation_type": "IN_ROW_DATA",
        "page_count": 2048,
        "record_count": 50000,
        "fragmentation_percent": 45.5,
    },
    {
        "table_name": "QUESTIONRESULTS",
        "index_name": "PK_QUESTIONRESULTS",
        "index_type": "CLUSTERED INDEX",
        "allocation_type": "IN_ROW_DATA",
        "page_count": 262144,
        "record_count": 9000000,
        "fragmentation_percent": 12.0,
    },
    {
        "table_name": "QUESTIONRESULTS",
        "index_name": "PK_QUESTIONRESULTS",
        "index_type": "CLUSTERED INDEX",
        "allocation_type": "LOB_DATA",
        "page_count": 1000,
        "record_count": 2000,
        "fragmentation_percent": 0.0,
    },
    {
        "table_name": "LONGQUESTIONRESULTS",
        "index_name": "IX_LONGQUESTIONRESULTS_Site",
        "index_type": "NONCLUSTERED INDEX",
        "allocation_type": "IN_ROW_DATA",
        "page_count": 640,
        "record_count": 12000,
        "fragmentation_percent": 30.0,
    },
    {
        "table_name": "ACTIONRESULTS",
        "index_name": "",
        "index_type": "HEAP",
        "allocation_type": "IN_ROW_DATA",
        "page_count": 16,
        "record_count": 300,
        "fragmentation_percent": None,
    },
    {
        "table_name": "FIXLETRESULTS",
        "index_name": "IX_FIXLETRESULTS_Computer",
        "index_type": "NONCLUSTERED INDEX",
        "allocation_type": "IN_ROW_DATA",
        "page_count": 1280,
        "record_count": 1000,
        "fragmentation_percent": 9.999,
    },
]
