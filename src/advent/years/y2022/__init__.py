"""Puzzle year 2022."""

from __future__ import annotations

from advent.core.year import Year
from advent.years.y2022.day06 import Day6
from advent.years.y2022.day10 import Day10
from advent.years.y2022.day25 import Day25


class Year2022(Year):
    year = 2022
    days = {
        6: Day6,
        10: Day10,
        25: Day25,
    }
