"""advent CLI — Typer-based unified entry point.

Commands
--------
run         Solve one or more days of a year and print the answers.
days        List the registered days.
years       List the registered years.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from advent.config.settings import get_settings
from advent.core.errors import DayNotFoundError
from advent.core.harness import RunReport, run_days
from advent.core.registry import get_registry

app = typer.Typer(
    name="advent",
    help="Daily puzzle solvers, grouped by year.",
    add_completion=False,
)

console = Console()


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


def _render_report(year: int, report: RunReport) -> Table:
    table = Table(title=f"{year}", show_lines=False)
    table.add_column("Day", justify="right")
    table.add_column("Title")
    table.add_column("Part one")
    table.add_column("Part two")
    table.add_column("ms", justify="right")
    for r in report.results:
        if r.ok:
            one = r.part_one if r.part_one is not None else "-"
            two = r.part_two if r.part_two is not None else "-"
            table.add_row(
                str(r.day), r.title, one, two, f"{r.part_one_ms + r.part_two_ms:.1f}",
            )
        else:
            table.add_row(str(r.day), r.title, f"[red]{r.status}[/red]", f"[dim]{escape(r.error)}[/dim]", "")
    return table


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def run(
    year: int = typer.Argument(..., help="Puzzle year, e.g. 2021."),
    days: Optional[list[int]] = typer.Argument(None, help="Day numbers (default: all registered)."),
    part: Optional[int] = typer.Option(None, "--part", "-p", min=1, max=2, help="Run only this part."),
    inputs: Optional[Path] = typer.Option(None, "--inputs", "-i", help="Inputs directory (overrides ADVENT_INPUTS_DIR)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Solve days of YEAR and print the answers."""
    _setup_logging(verbose)
    parts = (part,) if part else (1, 2)

    try:
        report = asyncio.run(run_days(year, days or None, inputs_dir=inputs, parts=parts))
    except DayNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    console.print(_render_report(year, report))
    if report.failed:
        raise typer.Exit(1)


@app.command(name="days")
def list_days(
    year: Optional[int] = typer.Argument(None, help="Only this year."),
) -> None:
    """List the registered days."""
    _setup_logging()
    registry = get_registry()
    if year is not None and year not in registry:
        typer.echo(str(DayNotFoundError(year)), err=True)
        raise typer.Exit(1)

    for y, entry in registry.items():
        if year is not None and y != year:
            continue
        for number, day_cls in entry.days.items():
            typer.echo(f"  {y}  day {number:2d}  {day_cls.title}")


@app.command()
def years() -> None:
    """List the registered years."""
    _setup_logging()
    registry = get_registry()
    if not registry:
        typer.echo("No years registered.")
        return
    for y, entry in registry.items():
        numbers = ", ".join(str(n) for n in entry.numbers())
        typer.echo(f"  {y}  {len(entry.days):2d} day(s)  [{numbers}]")


def main() -> int:
    """Entry point for the ``advent`` console script."""
    app()
    return 0
