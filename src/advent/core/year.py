"""Year — a read-only table of the days implemented for one puzzle year.

Subclasses declare ``year`` and a ``days`` dict; on class creation the table
is validated, each day class is stamped with its year and number, and the
mapping is frozen so nothing can register days afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from advent.core.day import Day
from advent.core.errors import DayNotFoundError
from advent.core.input import Input

logger = logging.getLogger(__name__)

FIRST_DAY = 1
LAST_DAY = 25


class Year:
    """Base class for per-year day registries."""

    year: int = 0
    days: Mapping[int, type[Day]] = MappingProxyType({})

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Validate and freeze the subclass's day table."""
        super().__init_subclass__(**kwargs)
        table: dict[int, type[Day]] = {}
        for number, day_cls in dict(cls.days).items():
            if not FIRST_DAY <= number <= LAST_DAY:
                raise ValueError(f"{cls.__name__}: day {number} outside {FIRST_DAY}..{LAST_DAY}")
            if not (isinstance(day_cls, type) and issubclass(day_cls, Day)):
                raise TypeError(f"{cls.__name__}: day {number} is not a Day subclass")
            # Only the class's own stamp counts; subclasses inherit their parent's.
            own = vars(day_cls)
            stamped = (own.get("year", 0), own.get("number", 0))
            if stamped != (0, 0) and stamped != (cls.year, number):
                raise ValueError(
                    f"{cls.__name__}: {day_cls.__name__} is already registered as "
                    f"{stamped[0]} day {stamped[1]}"
                )
            day_cls.year = cls.year
            day_cls.number = number
            table[number] = day_cls
        cls.days = MappingProxyType(dict(sorted(table.items())))

    def resolve(self, number: int) -> type[Day]:
        """Return the day class registered under *number*."""
        day_cls = self.days.get(number)
        if day_cls is None:
            raise DayNotFoundError(self.year, number)
        return day_cls

    def day(self, number: int, inputs_dir: Path | None = None) -> Day:
        """Resolve, load the input for, and construct day *number*.

        Resolution happens first, so an unknown day never touches the
        inputs directory.
        """
        day_cls = self.resolve(number)
        puzzle_input = Input.load(self.year, number, inputs_dir)
        logger.debug("Constructing %s for %d day %d", day_cls.__name__, self.year, number)
        return day_cls(puzzle_input)

    def numbers(self) -> list[int]:
        """Registered day numbers in ascending order."""
        return list(self.days)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.year}: {len(self.days)} days>"
