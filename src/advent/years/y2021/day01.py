"""2021 day 1 — sonar sweep depth increases."""

from __future__ import annotations

from advent.core.day import Day, answer
from advent.core.input import Input
from advent.core.sequences import count_increases, windows


class Day1(Day):
    title = "Sonar Sweep"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.depths: tuple[int, ...] = tuple(input.decode_many("\n", int))

    async def part_one(self) -> str:
        return answer(count_increases(self.depths))

    async def part_two(self) -> str:
        # Each three-measurement window is summed before comparing neighbours.
        sums = (sum(window) for window in windows(self.depths, 3))
        return answer(count_increases(sums))
