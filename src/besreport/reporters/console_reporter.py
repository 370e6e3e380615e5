"""Rich terminal output for diagnostics reports."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from besreport.analyzers.fragmentation_analyzer import recommended_action
from besreport.utils.formatting import (
    format_bytes,
    format_count,
    format_kb,
    format_percentage,
    shorten_name,
    status_color,
)

if TYPE_CHECKING:
    from besreport import DiagnosticsReport


class ConsoleReporter:
    """Render diagnostics results to the terminal using Rich."""

    def __init__(self, report: DiagnosticsReport, console: Console | None = None) -> None:
        self.report = report
        self.console = console or Console()

    def print_report(self) -> None:
        """Print every non-empty section of the report."""
        self._print_header()
        if self.report.size_rows:
            self.print_size_report()
        if self.report.fragmentation_rows:
            self.print_fragmentation_summary()
            self.print_fragmentation_report()

    def _print_header(self) -> None:
        database = self.report.database or "(unnamed)"
        self.console.print(
            Panel(
                f"[bold white]BigFix Database Diagnostics[/]\n"
                f"Database: {database}\n"
                f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
                style="bold blue",
            )
        )

    def print_size_report(self) -> None:
        """Print the largest properties table."""
        table = Table(title=f"Top {self.report.top_n} Properties by Size")
        table.add_column("#", justify="right")
        table.add_column("Site", justify="right")
        table.add_column("Analysis", justify="right")
        table.add_column("Property", justify="right")
        table.add_column("Source Table")
        table.add_column("Bytes", justify="right")
        table.add_column("KB", justify="right")
        table.add_column("MB", justify="right")
        table.add_column("GB", justify="right")
        table.add_column("Size", justify="right")
        table.add_column("% of Total", justify="right")

        for rank, row in enumerate(self.report.size_rows, start=1):
            table.add_row(
                str(rank),
                str(row.site_id),
                str(row.analysis_id),
                str(row.property_id),
                row.source_table.table_name,
                f"{row.total_bytes:,}",
                f"{row.data_size_kb:,}",
                f"{row.data_size_mb:,}",
                f"{row.data_size_gb:,}",
                format_bytes(row.total_bytes),
                format_percentage(row.data_size_percentage),
            )

        self.console.print(table)

    def print_fragmentation_summary(self) -> None:
        """Print index counts per fragmentation status."""
        summary = self.report.fragmentation_summary
        table = Table(title="Fragmentation Summary")
        table.add_column("Status", style="bold")
        table.add_column("Indexes", justify="right")

        table.add_row(f"[{status_color('High')}]High[/]", str(summary.high))
        table.add_row(f"[{status_color('Moderate')}]Moderate[/]", str(summary.moderate))
        table.add_row(f"[{status_color('Low')}]Low[/]", str(summary.low))
        table.add_row("Total", str(summary.total_indexes))
        table.add_row("Space Used", format_kb(summary.total_space_kb))

        self.console.print(table)

    def print_fragmentation_report(self) -> None:
        """Print every index with its space usage and status."""
        table = Table(title=f"Index Fragmentation ({len(self.report.fragmentation_rows)})")
        table.add_column("Table")
        table.add_column("Index")
        table.add_column("Type")
        table.add_column("Allocation")
        table.add_column("Pages", justify="right")
        table.add_column("Records", justify="right")
        table.add_column("Frag %", justify="right")
        table.add_column("Space", justify="right")
        table.add_column("Status")
        table.add_column("Action")

        for row in self.report.fragmentation_rows:
            status = row.fragmentation_status.value
            table.add_row(
                shorten_name(row.table_name, 40),
                shorten_name(row.index_name or "(heap)", 40),
                row.index_type,
                row.allocation_type,
                f"{row.page_count:,}",
                format_count(row.record_count),
                format_percentage(row.fragmentation_percent),
                format_kb(row.space_used_kb),
                f"[{status_color(status)}]{status}[/]",
                recommended_action(row.fragmentation_status),
            )

        self.console.print(table)
