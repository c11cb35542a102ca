"""Harness — resolve, construct and run puzzle days.

Each (year, day) goes through the same stages::

    Unresolved -> Resolved(day class) -> Constructed(day) -> {part one, part two}

A failure at any stage ends the run for that day; it is recorded on the
:class:`DayResult` and the harness moves on to the next day.  An exception
raised while a part runs marks the day ``part_failed``; the other part still
reports its answer.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable, Literal

from advent.core.day import Day
from advent.core.errors import DayNotFoundError, InputNotFoundError, MalformedInputError
from advent.core.input import Input
from advent.core.registry import get_year

logger = logging.getLogger(__name__)

DayStatus = Literal["ok", "not_found", "missing_input", "malformed_input", "part_failed"]
Part = Literal[1, 2]


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass
class DayResult:
    """Outcome of running one (year, day)."""

    year: int
    day: int
    title: str = ""
    status: DayStatus = "ok"
    part_one: str | None = None
    part_two: str | None = None
    """``None`` when the part was not requested or the day failed."""
    error: str = ""
    part_one_ms: float = 0.0
    part_two_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status == "ok"


@dataclass
class RunReport:
    """Aggregate of a harness run."""

    total: int = 0
    solved: int = 0
    failed: int = 0
    results: list[DayResult] = field(default_factory=list)
    total_time_ms: float = 0.0


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------


async def _timed(part: Callable[[], Awaitable[str]]) -> tuple[str, float]:
    t0 = time.perf_counter()
    value = await part()
    return value, (time.perf_counter() - t0) * 1000


async def solve(day: Day, parts: Sequence[Part] = (1, 2)) -> DayResult:
    """Run the requested parts of an already constructed day."""
    result = DayResult(year=day.year, day=day.number, title=day.title)

    jobs: dict[Part, Awaitable[tuple[str, float]]] = {}
    if 1 in parts:
        jobs[1] = _timed(day.part_one)
    if 2 in parts:
        jobs[2] = _timed(day.part_two)

    outcomes = await asyncio.gather(*jobs.values(), return_exceptions=True)
    errors: list[str] = []
    for part, outcome in zip(jobs, outcomes):
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            logger.error(
                "%d day %d part %d failed: %s", day.year, day.number, part, outcome,
                exc_info=outcome,
            )
            errors.append(f"part {part}: {type(outcome).__name__}: {outcome}")
            continue
        value, elapsed = outcome
        if part == 1:
            result.part_one, result.part_one_ms = value, elapsed
        else:
            result.part_two, result.part_two_ms = value, elapsed

    if errors:
        result.status = "part_failed"
        result.error = "; ".join(errors)
    return result


async def run_day(
    year: int,
    day: int,
    *,
    inputs_dir: Path | None = None,
    parts: Sequence[Part] = (1, 2),
) -> DayResult:
    """Resolve, construct and solve a single day."""
    try:
        day_cls = get_year(year).resolve(day)
    except DayNotFoundError as exc:
        logger.warning("%s", exc)
        return DayResult(year=year, day=day, status="not_found", error=str(exc))

    try:
        puzzle_input = Input.load(year, day, inputs_dir)
    except InputNotFoundError as exc:
        logger.warning("%s", exc)
        return DayResult(
            year=year, day=day, title=day_cls.title, status="missing_input", error=str(exc),
        )

    try:
        instance = day_cls(puzzle_input)
    except MalformedInputError as exc:
        logger.error("Malformed input: %s", exc)
        return DayResult(
            year=year, day=day, title=day_cls.title, status="malformed_input", error=str(exc),
        )

    result = await solve(instance, parts)
    logger.info(
        "%d day %2d  %-28s  one=%s  two=%s",
        year, day, day_cls.title, result.part_one, result.part_two,
    )
    return result


async def run_days(
    year: int,
    days: Iterable[int] | None = None,
    *,
    inputs_dir: Path | None = None,
    parts: Sequence[Part] = (1, 2),
) -> RunReport:
    """Run several days of *year* (default: every registered day).

    Days are independent; a failed day does not stop the others.  Asking
    for every day of an unknown year raises :class:`DayNotFoundError`.
    """
    if days is None:
        days = get_year(year).numbers()

    report = RunReport()
    t_start = time.perf_counter()

    for number in days:
        result = await run_day(year, number, inputs_dir=inputs_dir, parts=parts)
        report.results.append(result)
        report.total += 1
        if result.ok:
            report.solved += 1
        else:
            report.failed += 1

    report.total_time_ms = (time.perf_counter() - t_start) * 1000
    logger.info(
        "Ran %d day(s) of %d: %d ok, %d failed in %.1fms",
        report.total, year, report.solved, report.failed, report.total_time_ms,
    )
    return report
