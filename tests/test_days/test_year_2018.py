"""Tests for the 2018 days."""

from __future__ import annotations

import pytest

from advent.core.input import Input
from advent.years.y2018.day01 import Day1, first_repeated_frequency
from tests.conftest import solve


class TestFirstRepeatedFrequency:
    @pytest.mark.parametrize(
        ("changes", "expected"),
        [
            ((+1, -1), 0),
            ((+3, +3, +4, -2, -4), 10),
            ((-6, +3, +8, +5, -6), 5),
            ((+7, +7, -2, -7, -4), 14),
        ],
    )
    def test_examples(self, changes: tuple[int, ...], expected: int) -> None:
        assert first_repeated_frequency(changes) == expected

    def test_empty(self) -> None:
        assert first_repeated_frequency(()) == 0

    def test_never_repeats(self) -> None:
        assert first_repeated_frequency((+1,)) is None
        assert first_repeated_frequency((+1, +1)) is None


class TestDay1:
    @pytest.mark.asyncio
    async def test_example(self) -> None:
        assert await solve(Day1, "+1\n-2\n+3\n+1") == ("3", "2")

    @pytest.mark.asyncio
    async def test_zero_drift(self) -> None:
        assert await solve(Day1, "+1\n+1\n-2") == ("0", "0")

    @pytest.mark.asyncio
    async def test_negative_sum(self) -> None:
        day = Day1(Input("-1\n-2\n-3"))
        assert await day.part_one() == "-6"

    @pytest.mark.asyncio
    async def test_drifting_input_has_no_second_answer(self) -> None:
        assert await solve(Day1, "+1\n+1") == ("2", "")
