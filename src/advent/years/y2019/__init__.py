"""Puzzle year 2019."""

from __future__ import annotations

from advent.core.year import Year
from advent.years.y2019.day01 import Day1
from advent.years.y2019.day02 import Day2
from advent.years.y2019.day04 import Day4
from advent.years.y2019.day06 import Day6


class Year2019(Year):
    year = 2019
    days = {
        1: Day1,
        2: Day2,
        4: Day4,
        6: Day6,
    }
