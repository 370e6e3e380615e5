"""Data classes for report inputs and output rows."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class SourceTable(str, Enum):
    """Property result table a size fact was read from."""

    PRIMARY = "PRIMARY"
    OVERFLOW = "OVERFLOW"

    @property
    def table_name(self) -> str:
        """BigFix table backing this source."""
        if self is SourceTable.PRIMARY:
            return "QUESTIONRESULTS"
        return "LONGQUESTIONRESULTS"


class FragmentationStatus(str, Enum):
    """Fragmentation severity band of an index."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


@dataclass(frozen=True)
class SizeRecord:
    """Byte size of one property result for one computer.

    Attributes:
        site_id: BigFix site ID.
        analysis_id: Analysis ID within the site.
        property_id: Property ID within the analysis.
        computer_id: Reporting computer.
        primary_bytes: Result size in QUESTIONRESULTS, or None.
        overflow_bytes: Result size in LONGQUESTIONRESULTS, or None.
    """

    site_id: int
    analysis_id: int
    property_id: int
    computer_id: int = 0
    primary_bytes: int | None = None
    overflow_bytes: int | None = None

    @property
    def source_table(self) -> SourceTable:
        # Only the primary column decides; a record with both sizes absent
        # still counts as PRIMARY.
        if self.primary_bytes is not None:
            return SourceTable.PRIMARY
        if self.overflow_bytes is not None:
            return SourceTable.OVERFLOW
        return SourceTable.PRIMARY

    @property
    def size_bytes(self) -> int:
        if self.primary_bytes is not None:
            return self.primary_bytes
        return self.overflow_bytes or 0


@dataclass(frozen=True)
class PropertyAggregate:
    """Total bytes of one property in one source table."""

    site_id: int
    analysis_id: int
    property_id: int
    source_table: SourceTable
    total_bytes: int = 0


@dataclass(frozen=True)
class SizeReportRow:
    """One ranked row of the property size report."""

    site_id: int
    analysis_id: int
    property_id: int
    source_table: SourceTable
    total_bytes: int
    data_size_kb: int
    data_size_mb: int
    data_size_gb: int
    data_size_percentage: float

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["source_table"] = self.source_table.value
        return data


@dataclass(frozen=True)
class IndexStat:
    """Physical statistics of one index allocation unit.

    Attributes:
        table_name: Owning table.
        index_name: Index name (empty for heaps).
        index_type: e.g. CLUSTERED INDEX, NONCLUSTERED INDEX, HEAP.
        allocation_type: IN_ROW_DATA, LOB_DATA or ROW_OVERFLOW_DATA.
        page_count: Number of 8 KB pages.
        record_count: Number of records.
        fragmentation_percent: Logical fragmentation (0-100), None if unmeasured.
    """

    table_name: str
    index_name: str = ""
    index_type: str = ""
    allocation_type: str = ""
    page_count: int = 0
    record_count: int = 0
    fragmentation_percent: float | None = None


@dataclass(frozen=True)
class FragmentationReportRow:
    """One index row of the fragmentation report."""

    table_name: str
    index_name: str
    index_type: str
    allocation_type: str
    page_count: int
    record_count: int
    fragmentation_percent: float | None
    space_used_kb: int
    space_used_mb: int
    space_used_gb: int
    fragmentation_status: FragmentationStatus

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["fragmentation_status"] = self.fragmentation_status.value
        return data


@dataclass(frozen=True)
class FragmentationSummary:
    """Index counts per fragmentation status and total space used."""

    total_indexes: int = 0
    high: int = 0
    moderate: int = 0
    low: int = 0
    total_space_kb: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)
