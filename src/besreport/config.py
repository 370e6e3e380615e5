"""Configuration for besreport runs."""

from __future__ import annotations

from dataclasses import dataclass

OUTPUT_FORMATS = ("console", "json", "html")


@dataclass
class ReportConfig:
    """Report run configuration.

    Attributes:
        top_n: Number of properties kept in the size report.
        output_format: One of 'console', 'json' or 'html'.
        output_path: Destination file for json/html output.
    """

    top_n: int = 20
    output_format: str = "console"
    output_path: str = ""

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors: list[str] = []
        if self.top_n < 1:
            errors.append(f"Top N must be at least 1, got {self.top_n}")
        if self.output_format not in OUTPUT_FORMATS:
            errors.append(f"Unsupported output format: {self.output_format}")
        elif self.output_format != "console" and not self.output_path:
            errors.append(f"Output path is required for {self.output_format} output")
        return errors
