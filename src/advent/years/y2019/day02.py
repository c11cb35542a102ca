"""2019 day 2 — the 1202 program alarm."""

from __future__ import annotations

from itertools import product

from advent.core.day import Day, answer
from advent.core.input import Input
from advent.years.y2019.intcode import IntcodeError, run_with

TARGET_OUTPUT = 19690720


def find_noun_verb(program: tuple[int, ...], target: int = TARGET_OUTPUT) -> tuple[int, int] | None:
    """Search nouns and verbs 0–99 for the pair producing *target*."""
    for noun, verb in product(range(100), repeat=2):
        try:
            if run_with(program, noun, verb) == target:
                return noun, verb
        except IntcodeError:
            # Some pairs point outside memory; they are simply not answers.
            continue
    return None


class Day2(Day):
    title = "1202 Program Alarm"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.program: tuple[int, ...] = tuple(input.decode_many(",", int))

    async def part_one(self) -> str:
        return answer(run_with(self.program, 12, 2))

    async def part_two(self) -> str:
        found = find_noun_verb(self.program)
        if found is None:
            return answer(None)
        noun, verb = found
        return answer(100 * noun + verb)
