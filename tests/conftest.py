"""Shared test fixtures for advent.

Provides a temporary inputs tree and a helper to build days straight from
example text, so individual test modules stay focused on puzzle logic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from advent.core.day import Day
from advent.core.input import Input
from advent.core.registry import reset_registry

# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@pytest.fixture()
def inputs_dir(tmp_path: Path) -> Path:
    """An empty inputs root laid out as ``<root>/<year>/dayNN.txt``."""
    root = tmp_path / "inputs"
    root.mkdir()
    return root


@pytest.fixture()
def write_input(inputs_dir: Path) -> Callable[[int, int, str], Path]:
    """Write puzzle text for (year, day) into the temporary inputs tree."""

    def _write(year: int, day: int, text: str) -> Path:
        path = inputs_dir / str(year) / f"day{day:02d}.txt"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def fresh_registry():
    """Rediscover years before and after the test."""
    reset_registry()
    yield
    reset_registry()


# ---------------------------------------------------------------------------
# Days
# ---------------------------------------------------------------------------


async def solve(day_cls: type[Day], text: str) -> tuple[str, str]:
    """Construct *day_cls* from example text and await both parts."""
    day = day_cls(Input(text))
    return await day.part_one(), await day.part_two()
