#!/usr/bin/env python3
"""
groupcheck CLI - Declarative Checks over Groups of Elements

Usage:
    groupcheck run <suite.yaml> [OPTIONS]
    groupcheck validate <suite.yaml>
    groupcheck info
    groupcheck --version
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .reporting import RunStatus
from .suites import CheckOp, load_suite, run_suite

app = typer.Typer(
    name="groupcheck",
    help="🔎 groupcheck - Fluent assertions over groups of elements",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"🔎 groupcheck v{__version__}")
        raise typer.Exit()


def setup_logging(level: str) -> None:
    """Route library logging through rich at the given level."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level: {level}", param_hint="--log-level")
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    🔎 groupcheck - Fluent assertions over groups of elements

    Check lists, sets, iterators and arrays with declarative YAML suites.
    """
    pass


@app.command()
def run(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show failures, errors and final status"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
    report_dir: Path = typer.Option(
        Path("reports"), "--report-dir", "-r",
        help="Directory to save JSON reports"
    ),
    no_report: bool = typer.Option(
        False, "--no-report",
        help="Don't save a JSON report file"
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l",
        help="Logging level: DEBUG, INFO, WARNING or ERROR"
    ),
):
    """
    Run a check suite.

    Execute every check in the suite and generate a run report.
    """
    if output not in ("text", "json"):
        raise typer.BadParameter("Output format must be 'text' or 'json'", param_hint="--output")
    setup_logging(log_level)

    # JSON output goes to stdout alone
    chatty = not quiet and output == "text"

    if chatty:
        console.print(f"\n📄 Loading suite: {suite_file}")

    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation), markup=False)
        raise typer.Exit(code=1)

    if chatty:
        console.print(f"   [green]✅ Valid suite:[/green] {suite.name}")

    reporter = run_suite(
        suite,
        console=console if output == "text" else None,
        verbose=chatty,
    )
    report = reporter.report

    # Output results
    if output == "json":
        console.print_json(data=report.to_dict())
    else:
        console.print("\n" + report.summary(), markup=False, highlight=False)

    # Save report
    if not no_report:
        report_path = report_dir / f"{report.run_id}.json"
        reporter.save_json(report_path)
        if chatty:
            console.print(f"\n📁 Report saved: {report_path}")

    # Exit with appropriate code
    if report.status == RunStatus.PASSED:
        raise typer.Exit(code=0)
    else:
        raise typer.Exit(code=1)


@app.command()
def validate(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate a suite YAML file.

    Check the schema and report any errors without running the suite.
    """
    console.print(f"\n📄 Validating: {suite_file}")

    suite, validation = load_suite(suite_file)

    if validation.is_valid:
        console.print(f"\n[green]✅ Valid suite:[/green] {suite.name}")
        console.print(f"   Groups: {len(suite.groups)}")
        console.print(f"   Checks: {len(suite.checks)}")

        # Show checks summary
        table = Table(title="Checks")
        table.add_column("ID", style="cyan")
        table.add_column("Group", style="magenta")
        table.add_column("Op")
        table.add_column("Details")

        for check in suite.checks:
            group = suite.groups[check.group]
            details = [f"kind: {group.kind.value}"]
            if check.value is not None:
                details.append(f"value: {escape(repr(check.value))}")
            if check.op == CheckOp.CONTAINS_AT:
                details.append(f"index: {check.index}")
            if check.delta is not None:
                details.append(f"delta: {check.delta}")
            if check.property:
                details.append(f"property: {check.property}")
            table.add_row(escape(check.id), escape(check.group), check.op.value, ", ".join(details))

        console.print()
        console.print(table)
        raise typer.Exit(code=0)
    else:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation), markup=False)
        raise typer.Exit(code=1)


@app.command()
def info():
    """
    Show information about groupcheck.
    """
    console.print(f"""
🔎 [bold]groupcheck[/bold] v{__version__}

Fluent assertions over groups of elements

[bold]Features:[/bold]
  • assert_that() for lists, sets, iterators, tuples, arrays and mappings
  • Membership, duplicate, sequence and position checks
  • Float array equality within a delta
  • Property extraction with dotted paths or JSONPath
  • Declarative YAML check suites with JSON run reports

[bold]Quick Start:[/bold]
  groupcheck run checks/inventory.yaml
  groupcheck validate checks/inventory.yaml
""")


if __name__ == "__main__":
    app()
