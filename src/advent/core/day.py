"""Day — abstract base class for all puzzle days.

A day is constructed from an :class:`~advent.core.input.Input` and exposes
two independent answer computations.  Construction decodes everything the
day needs; the parts must not mutate the instance.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from advent.core.input import Input


def answer(value: Any) -> str:
    """Render a puzzle answer for display."""
    if value is None:
        return ""
    return str(value)


class Day(ABC):
    """Abstract base for a single puzzle day.

    Attributes
    ----------
    year:
        Puzzle year, stamped by the :class:`~advent.core.year.Year` that
        registers the day.
    number:
        Day number (1–25), stamped at registration.
    title:
        Short human-readable puzzle title.
    """

    year: int = 0
    number: int = 0
    title: str = ""

    @abstractmethod
    def __init__(self, input: Input) -> None:  # noqa: A002
        """Decode *input*; raise ``MalformedInputError`` if it is unusable."""

    @abstractmethod
    async def part_one(self) -> str:
        """Compute the first answer."""

    @abstractmethod
    async def part_two(self) -> str:
        """Compute the second answer."""

    @classmethod
    def to_schema(cls) -> dict[str, Any]:
        """Return a JSON-serialisable description of the day."""
        return {"year": cls.year, "day": cls.number, "title": cls.title}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.year} day {self.number}>"
