"""
besreport -- Demo Script

Shows how to use besreport as a Python library: building input facts from
database rows, running both reports, reading the results and exporting
them. The rows below stand in for what a DB-API cursor returns for the
queries in ``besreport.sources.queries``.
"""

from besreport import ReportConfig, run_diagnostics
from besreport.reporters.console_reporter import ConsoleReporter
from besreport.reporters.html_reporter import HTMLReporter
from besreport.reporters.json_reporter import JSONReporter
from besreport.sources import (
    INDEX_STATS_QUERY,
    PROPERTY_SIZES_QUERY,
    index_stats_from_rows,
    size_records_from_rows,
)

# ---------------------------------------------------------------------------
# 1. Get the rows
# ---------------------------------------------------------------------------
# Run PROPERTY_SIZES_QUERY and INDEX_STATS_QUERY with your own database
# layer and zip each row with the cursor's column names, e.g.:
#
#   cursor.execute(PROPERTY_SIZES_QUERY)
#   columns = [d[0] for d in cursor.description]
#   size_rows = [dict(zip(columns, r)) for r in cursor.fetchall()]

print("Size query:", PROPERTY_SIZES_QUERY.strip().splitlines()[2].strip(), "...")
print("Index query:", INDEX_STATS_QUERY.strip().splitlines()[2].strip(), "...")

size_rows = [
    {"site_id": 1, "analysis_id": 12, "property_id": 3, "computer_id": 1001,
     "primary_bytes": 18_432, "overflow_bytes": None},
    {"site_id": 1, "analysis_id": 12, "property_id": 3, "computer_id": 1002,
     "primary_bytes": None, "overflow_bytes": 2_621_440},
    {"site_id": 2, "analysis_id": 40, "property_id": 1, "computer_id": 1001,
     "primary_bytes": 96, "overflow_bytes": None},
]

index_rows = [
    {"table_name": "QUESTIONRESULTS", "index_name": "PK_QUESTIONRESULTS",
     "index_type": "CLUSTERED INDEX", "allocation_type": "IN_ROW_DATA",
     "page_count": 524_288, "record_count": 12_000_000, "fragmentation_percent": 41.2},
    {"table_name": "LONGQUESTIONRESULTS", "index_name": "PK_LONGQUESTIONRESULTS",
     "index_type": "CLUSTERED INDEX", "allocation_type": "LOB_DATA",
     "page_count": 65_536, "record_count": 90_000, "fragmentation_percent": 14.8},
]

# ---------------------------------------------------------------------------
# 2. Run the reports
# ---------------------------------------------------------------------------
report = run_diagnostics(
    size_records=size_records_from_rows(size_rows),
    index_stats=index_stats_from_rows(index_rows),
    config=ReportConfig(top_n=10),
    database="BFEnterprise",
)

# ---------------------------------------------------------------------------
# 3. Read the results
# ---------------------------------------------------------------------------
for row in report.size_rows:
    print(
        f"{row.site_id}/{row.analysis_id}/{row.property_id} "
        f"[{row.source_table.table_name}] {row.data_size_mb} MB "
        f"({row.data_size_percentage:.2f}%)"
    )

for row in report.fragmentation_rows:
    print(
        f"{row.table_name}.{row.index_name}: {row.fragmentation_percent}% "
        f"-> {row.fragmentation_status.value}"
    )

# ---------------------------------------------------------------------------
# 4. Render or export
# ---------------------------------------------------------------------------
ConsoleReporter(report).print_report()
JSONReporter(report).export("bes_diagnostics.json")
HTMLReporter(report).export("bes_diagnostics.html")
print("Reports written to bes_diagnostics.json and bes_diagnostics.html")
