"""Puzzle year 2018."""

from __future__ import annotations

from advent.core.year import Year
from advent.years.y2018.day01 import Day1


class Year2018(Year):
    year = 2018
    days = {
        1: Day1,
    }
