"""Input sources for besreport: queries, row adapters and fact files."""

from besreport.sources.files import load_index_stats, load_rows, load_size_records
from besreport.sources.queries import INDEX_STATS_QUERY, PROPERTY_SIZES_QUERY, get_query
from besreport.sources.rows import index_stats_from_rows, size_records_from_rows

__all__ = [
    "INDEX_STATS_QUERY",
    "PROPERTY_SIZES_QUERY",
    "get_query",
    "index_stats_from_rows",
    "load_index_stats",
    "load_rows",
    "load_size_records",
    "size_records_from_rows",
]
