"""Puzzle year 2015."""

from __future__ import annotations

from advent.core.year import Year
from advent.years.y2015.day02 import Day2
from advent.years.y2015.day06 import Day6


class Year2015(Year):
    year = 2015
    days = {
        2: Day2,
        6: Day6,
    }
