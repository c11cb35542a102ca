"""2019 day 1 — fuel for launching spacecraft modules."""

from __future__ import annotations

from advent.core.day import Day, answer
from advent.core.input import Input


def fuel_required(mass: int) -> int:
    """Fuel for a mass: a third of it, rounded down, minus two."""
    return mass // 3 - 2


def total_fuel_required(mass: int) -> int:
    """Fuel for *mass* plus the fuel needed to carry that fuel, and so on.

    Stops as soon as an increment is zero or negative.
    """
    total = 0
    fuel = fuel_required(mass)
    while fuel > 0:
        total += fuel
        fuel = fuel_required(fuel)
    return total


class Day1(Day):
    title = "The Tyranny of the Rocket Equation"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.modules: tuple[int, ...] = tuple(input.decode_many("\n", int))

    async def part_one(self) -> str:
        return answer(sum(max(fuel_required(m), 0) for m in self.modules))

    async def part_two(self) -> str:
        return answer(sum(total_fuel_required(m) for m in self.modules))
