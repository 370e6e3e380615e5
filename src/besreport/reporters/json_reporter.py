"""JSON report exporter."""

from __future__ import annotations

import json
from datetime import datetime
from typing import TYPE_CHECKING, Any

from besreport import __version__
from besreport.analyzers.fragmentation_analyzer import recommended_action

if TYPE_CHECKING:
    from besreport import DiagnosticsReport


class JSONReporter:
    """Export diagnostics results as machine-readable JSON."""

    def __init__(self, report: DiagnosticsReport) -> None:
        self.report = report

    def to_dict(self) -> dict[str, Any]:
        """Build the JSON document as a plain dict."""
        return {
            "metadata": {
                "tool": "besreport",
                "version": __version__,
                "generated_at": datetime.now().isoformat(),
                "database": self.report.database,
                "top_n": self.report.top_n,
            },
            "size_report": [row.to_dict() for row in self.report.size_rows],
            "fragmentation_report": [
                {**row.to_dict(), "recommended_action": recommended_action(row.fragmentation_status)}
                for row in self.report.fragmentation_rows
            ],
            "fragmentation_summary": self.report.fragmentation_summary.to_dict(),
        }

    def export(self, output_path: str) -> None:
        """Export report to JSON file.

        Args:
            output_path: Path to write the JSON file.
        """
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, default=str, ensure_ascii=False)
