"""2018 day 1 — frequency drift."""

from __future__ import annotations

from itertools import accumulate, cycle

from advent.core.day import Day, answer
from advent.core.input import Input


def first_repeated_frequency(changes: tuple[int, ...]) -> int | None:
    """First running total reached twice while cycling *changes* forever.

    The starting frequency 0 counts as already seen.  Returns ``None`` when
    no total can ever repeat.
    """
    if not changes:
        return 0
    drift = sum(changes)
    prefixes = [0, *accumulate(changes)][:-1]
    # Totals only meet again if two prefixes differ by a multiple of the drift.
    if drift and len({p % abs(drift) for p in prefixes}) == len(prefixes):
        return None

    seen = {0}
    for frequency in accumulate(cycle(changes)):
        if frequency in seen:
            return frequency
        seen.add(frequency)
    raise AssertionError("unreachable")  # pragma: no cover


class Day1(Day):
    title = "Chronal Calibration"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.changes: tuple[int, ...] = tuple(input.decode_many("\n", int))

    async def part_one(self) -> str:
        return answer(sum(self.changes))

    async def part_two(self) -> str:
        return answer(first_repeated_frequency(self.changes))
