"""HTML report exporter."""

from __future__ import annotations

import os
from datetime import datetime
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from besreport import __version__
from besreport.analyzers.fragmentation_analyzer import recommended_action
from besreport.utils.formatting import format_bytes, format_count, format_kb, format_percentage

if TYPE_CHECKING:
    from besreport import DiagnosticsReport

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")


class HTMLReporter:
    """Export diagnostics results as a self-contained HTML page.

    Styles are inlined from ``templates/assets/style.css`` so the file can be
    mailed or attached to a ticket as is.
    """

    def __init__(self, report: DiagnosticsReport) -> None:
        self.report = report
        self.env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            autoescape=select_autoescape(["html"]),
        )
        self.env.filters["record_count"] = format_count
        self.env.filters["kb_size"] = format_kb
        self.env.filters["byte_size"] = format_bytes
        self.env.filters["percentage"] = format_percentage
        self.env.filters["action"] = recommended_action

    def render(self) -> str:
        """Render the report to an HTML string."""
        template = self.env.get_template("report.html")
        return template.render(
            report=self.report,
            version=__version__,
            generated_at=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            css=self._load_asset("assets/style.css"),
        )

    def export(self, output_path: str) -> None:
        """Export full HTML report.

        Args:
            output_path: Path to write the HTML file.
        """
        html = self.render()
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(html)

    def _load_asset(self, relative_path: str) -> str:
        """Load an asset file from the templates directory."""
        path = os.path.join(TEMPLATE_DIR, relative_path)
        if os.path.exists(path):
            with open(path, encoding="utf-8") as f:
                return f.read()
        return ""
