"""Error taxonomy for day resolution, input loading and decoding.

* ``DayNotFoundError``    — no registered implementation for (year, day)
* ``InputNotFoundError``  — the input file for (year, day) is missing
* ``MalformedInputError`` — the input text could not be decoded
* ``ParseError``          — raised by value-specific ``parse`` functions

The first three are reported by the harness and do not stop other days.
"""

from __future__ import annotations

from pathlib import Path


class AdventError(Exception):
    """Base class for harness-level failures."""


class DayNotFoundError(AdventError):
    """No day registered for the requested year/number."""

    def __init__(self, year: int, day: int | None = None) -> None:
        self.year = year
        self.day = day
        if day is None:
            msg = f"No days registered for year {year}"
        else:
            msg = f"Day {day} not found for year {year}"
        super().__init__(msg)


class InputNotFoundError(AdventError):
    """The input file for a day does not exist."""

    def __init__(self, year: int, day: int, path: Path) -> None:
        self.year = year
        self.day = day
        self.path = path
        super().__init__(f"No input for {year} day {day} at {path}")


class MalformedInputError(AdventError):
    """Input text could not be decoded into the value a day needs."""

    def __init__(self, message: str, year: int | None = None, day: int | None = None) -> None:
        self.year = year
        self.day = day
        if year is not None and day is not None:
            message = f"{year} day {day}: {message}"
        super().__init__(message)


class ParseError(ValueError):
    """A value-specific parser rejected its text."""
