"""2022 day 6 — tuning trouble: finding start markers in a datastream."""

from __future__ import annotations

from advent.core.day import Day, answer
from advent.core.input import Input
from advent.core.sequences import windows

PACKET_MARKER = 4
MESSAGE_MARKER = 14


def marker_end(stream: str, size: int) -> int | None:
    """Characters consumed when the last *size* of them are all distinct."""
    for start, window in enumerate(windows(stream, size)):
        if len(set(window)) == size:
            return start + size
    return None


class Day6(Day):
    title = "Tuning Trouble"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.stream = input.text.strip()

    async def part_one(self) -> str:
        return answer(marker_end(self.stream, PACKET_MARKER))

    async def part_two(self) -> str:
        return answer(marker_end(self.stream, MESSAGE_MARKER))
