"""Tests for the index fragmentation report."""

from __future__ import annotations

import pytest

from besreport.analyzers.fragmentation_analyzer import (
    classify_fragmentation,
    compute_fragmentation_report,
    recommended_action,
    summarize_fragmentation,
)
from besreport.exceptions import InvalidArgumentError
from besreport.models import FragmentationStatus, IndexStat


class TestClassifyFragmentation:
    @pytest.mark.parametrize(
        ("percent", "expected"),
        [
            (100.0, FragmentationStatus.HIGH),
            (30.0, FragmentationStatus.HIGH),
            (29.999, FragmentationStatus.MODERATE),
            (10.0, FragmentationStatus.MODERATE),
            (9.999, FragmentationStatus.LOW),
            (0.0, FragmentationStatus.LOW),
            (None, FragmentationStatus.LOW),
        ],
    )
    def test_band_boundaries(self, percent: float | None, expected: FragmentationStatus) -> None:
        assert classify_fragmentation(percent) is expected

    def test_status_values(self) -> None:
        assert [s.value for s in FragmentationStatus] == ["Low", "Moderate", "High"]


class TestRecommendedAction:
    def test_actions(self) -> None:
        assert recommended_action(FragmentationStatus.HIGH) == "REBUILD"
        assert recommended_action(FragmentationStatus.MODERATE) == "REORGANIZE"
        assert recommended_action(FragmentationStatus.LOW) == "NONE"


class TestComputeFragmentationReport:
    def test_output_length_equals_input(self, index_stats: list[IndexStat]) -> None:
        rows = compute_fragmentation_report(index_stats)
        assert len(rows) == len(index_stats)

    def test_empty_input_returns_empty(self) -> None:
        assert compute_fragmentation_report([]) == []

    def test_sorted_by_fragmentation_then_size(self, index_stats: list[IndexStat]) -> None:
        rows = compute_fragmentation_report(index_stats)
        order = [(r.table_name, r.allocation_type) for r in rows]
        assert order == [
            ("COMPUTERS", "IN_ROW_DATA"),
            ("LONGQUESTIONRESULTS", "IN_ROW_DATA"),
            ("QUESTIONRESULTS", "IN_ROW_DATA"),
            ("FIXLETRESULTS", "IN_ROW_DATA"),
            ("QUESTIONRESULTS", "LOB_DATA"),
            ("ACTIONRESULTS", "IN_ROW_DATA"),
        ]

    def test_statuses(self, index_stats: list[IndexStat]) -> None:
        rows = compute_fragmentation_report(index_stats)
        assert [r.fragmentation_status for r in rows] == [
            FragmentationStatus.HIGH,
            FragmentationStatus.HIGH,
            FragmentationStatus.MODERATE,
            FragmentationStatus.LOW,
            FragmentationStatus.LOW,
            FragmentationStatus.LOW,
        ]

    def test_space_used_conversion(self) -> None:
        rows = compute_fragmentation_report(
            [IndexStat("QUESTIONRESULTS", "PK", page_count=262144, fragmentation_percent=1.0)]
        )
        row = rows[0]
        assert row.space_used_kb == 2_097_152
        assert row.space_used_mb == 2048
        assert row.space_used_gb == 2

    def test_space_used_chained_floor(self) -> None:
        rows = compute_fragmentation_report([IndexStat("T", "IX", page_count=131071)])
        row = rows[0]
        assert row.space_used_kb == 1_048_568
        assert row.space_used_mb == 1023
        assert row.space_used_gb == 0

    def test_tie_on_fragmentation_and_mb_keeps_input_order(self) -> None:
        stats = [
            IndexStat("T", "IX_small", page_count=10, fragmentation_percent=35.0),
            IndexStat("T", "IX_large", page_count=100, fragmentation_percent=35.0),
        ]
        rows = compute_fragmentation_report(stats)

        assert [r.space_used_kb for r in rows] == [80, 800]
        assert [r.space_used_mb for r in rows] == [0, 0]
        assert [r.index_name for r in rows] == ["IX_small", "IX_large"]
        assert all(r.fragmentation_status is FragmentationStatus.HIGH for r in rows)

    def test_tie_on_fragmentation_sorted_by_mb(self) -> None:
        stats = [
            IndexStat("T", "IX_small", page_count=128, fragmentation_percent=50.0),
            IndexStat("T", "IX_large", page_count=1280, fragmentation_percent=50.0),
        ]
        rows = compute_fragmentation_report(stats)
        assert [r.index_name for r in rows] == ["IX_large", "IX_small"]

    def test_unmeasured_sorts_as_zero(self) -> None:
        stats = [
            IndexStat("T", "IX_none", page_count=256, fragmentation_percent=None),
            IndexStat("T", "IX_zero", page_count=128, fragmentation_percent=0.0),
            IndexStat("T", "IX_low", page_count=8, fragmentation_percent=0.5),
        ]
        rows = compute_fragmentation_report(stats)
        assert [r.index_name for r in rows] == ["IX_low", "IX_none", "IX_zero"]
        assert rows[1].fragmentation_percent is None

    def test_input_fields_carried_through(self, index_stats: list[IndexStat]) -> None:
        rows = compute_fragmentation_report(index_stats)
        heap = next(r for r in rows if r.table_name == "ACTIONRESULTS")
        assert heap.index_name == ""
        assert heap.index_type == "HEAP"
        assert heap.record_count == 300
        assert heap.page_count == 16


class TestFragmentationErrors:
    def test_negative_page_count_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="page_count"):
            compute_fragmentation_report([IndexStat("T", "IX", page_count=-1)])

    def test_negative_record_count_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="record_count"):
            compute_fragmentation_report([IndexStat("T", "IX", record_count=-1)])

    def test_percent_out_of_range_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="fragmentation_percent"):
            compute_fragmentation_report([IndexStat("T", "IX", fragmentation_percent=100.5)])

    def test_all_or_nothing(self) -> None:
        stats = [IndexStat("T", "IX_ok", page_count=1), IndexStat("T", "IX_bad", page_count=-1)]
        with pytest.raises(InvalidArgumentError):
            compute_fragmentation_report(stats)


class TestSummarizeFragmentation:
    def test_counts_per_status(self, index_stats: list[IndexStat]) -> None:
        summary = summarize_fragmentation(compute_fragmentation_report(index_stats))
        assert summary.total_indexes == 6
        assert summary.high == 2
        assert summary.moderate == 1
        assert summary.low == 3

    def test_total_space(self, index_stats: list[IndexStat]) -> None:
        summary = summarize_fragmentation(compute_fragmentation_report(index_stats))
        assert summary.total_space_kb == 2_137_024

    def test_empty(self) -> None:
        summary = summarize_fragmentation([])
        assert summary.total_indexes == 0
        assert summary.total_space_kb == 0
