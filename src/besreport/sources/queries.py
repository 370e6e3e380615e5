"""SQL text for the BigFix diagnostics reports.

Both queries are read-only and run with dirty reads so they never block the
BigFix server. Column aliases match the keys the row adapters expect.
"""

from __future__ import annotations

from besreport.exceptions import InvalidArgumentError

PROPERTY_SIZES_QUERY = """
    SET TRANSACTION ISOLATION LEVEL READ UNCOMMITTED;

    SELECT Q.SiteID AS site_id,
           Q.AnalysisID AS analysis_id,
           Q.PropertyID AS property_id,
           Q.ComputerID AS computer_id,
           DATALENGTH(Q.ResultsText) AS primary_bytes,
           DATALENGTH(L.ResultsText) AS overflow_bytes
    FROM dbo.QUESTIONRESULTS Q
    LEFT JOIN dbo.LONGQUESTIONRESULTS L
        ON Q.SiteID = L.SiteID
       AND Q.AnalysisID = L.AnalysisID
       AND Q.PropertyID = L.PropertyID
       AND Q.ComputerID = L.ComputerID
"""

INDEX_STATS_QUERY = """
    SET TRANSACTION ISOLATION LEVEL READ UNCOMMITTED;

    SELECT OBJECT_NAME(ips.object_id) AS table_name,
           ISNULL(i.name, '') AS index_name,
           ips.index_type_desc AS index_type,
           ips.alloc_unit_type_desc AS allocation_type,
           ips.page_count,
           ips.record_count,
           ips.avg_fragmentation_in_percent AS fragmentation_percent
    FROM sys.dm_db_index_physical_stats(DB_ID(), NULL, NULL, NULL, 'SAMPLED') ips
    JOIN sys.indexes i
        ON ips.object_id = i.object_id
       AND ips.index_id = i.index_id
    WHERE OBJECTPROPERTY(ips.object_id, 'IsUserTable') = 1
"""

QUERIES = {
    "sizes": PROPERTY_SIZES_QUERY,
    "fragmentation": INDEX_STATS_QUERY,
}


def get_query(name: str) -> str:
    """Return the SQL for a report by name ('sizes' or 'fragmentation')."""
    try:
        return QUERIES[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown report {name!r}; expected one of {', '.join(QUERIES)}"
        ) from None
