"""CLI entry point for besreport using Click."""

from __future__ import annotations

import logging
import sys
import textwrap
from typing import Any

import click
from rich.console import Console
from rich.syntax import Syntax

from besreport import DiagnosticsReport, __version__, run_diagnostics
from besreport.config import OUTPUT_FORMATS, ReportConfig
from besreport.exceptions import ReportError
from besreport.sources import get_query, load_index_stats, load_size_records
from besreport.sources.queries import QUERIES

console = Console()


def _build_config(kwargs: dict[str, Any]) -> ReportConfig:
    """Build and validate a ReportConfig from command options."""
    config = ReportConfig(
        top_n=kwargs.get("top", 20),
        output_format=kwargs.get("fmt", "console"),
        output_path=kwargs.get("output") or "",
    )
    errors = config.validate()
    if errors:
        for err in errors:
            console.print(f"[red]Error:[/red] {err}")
        sys.exit(1)
    return config


def output_options(func: Any) -> Any:
    """Decorator that adds common output options to a command."""
    func = click.option("--output", "-o", default=None, help="Output file path")(func)
    func = click.option(
        "--format",
        "-f",
        "fmt",
        default="console",
        type=click.Choice(list(OUTPUT_FORMATS)),
        help="Output format",
    )(func)
    func = click.option("--database", "-d", default="", help="Database name shown in the report")(
        func
    )
    func = click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")(func)
    return func


def top_option(func: Any) -> Any:
    """Decorator that adds the --top option for the size report."""
    return click.option(
        "--top",
        "-n",
        type=int,
        default=20,
        show_default=True,
        help="Number of properties to keep in the size report",
    )(func)


@click.group()
@click.version_option(version=__version__, prog_name="besreport")
def main() -> None:
    """besreport — BigFix database diagnostics.

    Ranks the largest properties across the property result tables and
    reports fragmentation and space usage for every index, from query
    results exported as JSON or CSV.
    """


@main.command()
@click.option(
    "--input", "-i", "input_path", required=True, type=click.Path(exists=True, dir_okay=False)
)
@top_option
@output_options
def sizes(**kwargs: Any) -> None:
    """Rank the largest properties by stored bytes."""
    _configure_logging(kwargs.get("verbose", False))
    config = _build_config(kwargs)

    report = _run(
        lambda: run_diagnostics(
            size_records=load_size_records(kwargs["input_path"]),
            config=config,
            database=kwargs.get("database", ""),
        )
    )
    _emit(report, config)


@main.command()
@click.option(
    "--input", "-i", "input_path", required=True, type=click.Path(exists=True, dir_okay=False)
)
@output_options
def fragmentation(**kwargs: Any) -> None:
    """Report fragmentation and space usage for every index."""
    _configure_logging(kwargs.get("verbose", False))
    config = _build_config(kwargs)

    report = _run(
        lambda: run_diagnostics(
            index_stats=load_index_stats(kwargs["input_path"]),
            config=config,
            database=kwargs.get("database", ""),
        )
    )
    _emit(report, config)


@main.command()
@click.option("--sizes", "sizes_path", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option(
    "--fragmentation",
    "fragmentation_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
)
@top_option
@output_options
def report(**kwargs: Any) -> None:
    """Run both reports in one document."""
    _configure_logging(kwargs.get("verbose", False))
    sizes_path = kwargs.get("sizes_path")
    fragmentation_path = kwargs.get("fragmentation_path")
    if not sizes_path and not fragmentation_path:
        console.print("[red]Error:[/red] Provide --sizes and/or --fragmentation input files")
        sys.exit(1)
    config = _build_config(kwargs)

    result = _run(
        lambda: run_diagnostics(
            size_records=load_size_records(sizes_path) if sizes_path else None,
            index_stats=load_index_stats(fragmentation_path) if fragmentation_path else None,
            config=config,
            database=kwargs.get("database", ""),
        )
    )
    _emit(result, config)


@main.command()
@click.argument("name", type=click.Choice(sorted(QUERIES)))
def query(name: str) -> None:
    """Print the SQL whose results feed a report."""
    console.print(Syntax(textwrap.dedent(get_query(name)).strip(), "sql", word_wrap=True))


# ── Helpers ──────────────────────────────────────────────────────────


def _run(build: Any) -> DiagnosticsReport:
    """Run a report builder, turning report errors into a clean exit."""
    try:
        return build()
    except ReportError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


def _emit(report: DiagnosticsReport, config: ReportConfig) -> None:
    """Print or export the report according to the config."""
    if config.output_format == "console":
        from besreport.reporters.console_reporter import ConsoleReporter

        ConsoleReporter(report, console=console).print_report()
        return

    if config.output_format == "html":
        from besreport.reporters.html_reporter import HTMLReporter

        HTMLReporter(report).export(config.output_path)
    elif config.output_format == "json":
        from besreport.reporters.json_reporter import JSONReporter

        JSONReporter(report).export(config.output_path)

    console.print(f"\n[green]Report saved to:[/green] {config.output_path}")


def _configure_logging(verbose: bool) -> None:
    """Configure logging level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


if __name__ == "__main__":
    main()
