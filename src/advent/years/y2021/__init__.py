"""Puzzle year 2021."""

from __future__ import annotations

from advent.core.year import Year
from advent.years.y2021.day01 import Day1
from advent.years.y2021.day13 import Day13


class Year2021(Year):
    year = 2021
    days = {
        1: Day1,
        13: Day13,
    }
