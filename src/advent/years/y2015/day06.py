"""2015 day 6 — a 1000x1000 grid of lights driven by rectangle instructions."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

import numpy as np

from advent.core.day import Day, answer
from advent.core.errors import ParseError
from advent.core.input import Input

GRID_SIZE = 1000


class Action(str, enum.Enum):
    TURN_ON = "turn on"
    TURN_OFF = "turn off"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class Instruction:
    """An action over the inclusive rectangle (x1, y1)–(x2, y2)."""

    action: Action
    x1: int
    y1: int
    x2: int
    y2: int

    pattern = re.compile(r"^(turn on|turn off|toggle) (\d+),(\d+) through (\d+),(\d+)$")

    @classmethod
    def parse(cls, text: str) -> Instruction:
        match = cls.pattern.match(text.strip())
        if match is None:
            raise ParseError(f"not a light instruction: {text!r}")
        action, *coords = match.groups()
        x1, y1, x2, y2 = (int(c) for c in coords)
        if max(x1, y1, x2, y2) >= GRID_SIZE or x1 > x2 or y1 > y2:
            raise ParseError(f"rectangle out of range: {text!r}")
        return cls(Action(action), x1, y1, x2, y2)

    @property
    def region(self) -> tuple[slice, slice]:
        return slice(self.x1, self.x2 + 1), slice(self.y1, self.y2 + 1)


def lights_on(instructions: tuple[Instruction, ...], size: int = GRID_SIZE) -> int:
    """Count lights lit after following on/off/toggle literally."""
    grid = np.zeros((size, size), dtype=bool)
    for ins in instructions:
        region = ins.region
        if ins.action is Action.TURN_ON:
            grid[region] = True
        elif ins.action is Action.TURN_OFF:
            grid[region] = False
        else:
            grid[region] = ~grid[region]
    return int(grid.sum())


def total_brightness(instructions: tuple[Instruction, ...], size: int = GRID_SIZE) -> int:
    """Sum of brightness when on/off/toggle mean +1/-1 (floored at 0)/+2."""
    grid = np.zeros((size, size), dtype=np.int64)
    for ins in instructions:
        region = ins.region
        if ins.action is Action.TURN_ON:
            grid[region] += 1
        elif ins.action is Action.TURN_OFF:
            grid[region] = np.maximum(grid[region] - 1, 0)
        else:
            grid[region] += 2
    return int(grid.sum())


class Day6(Day):
    title = "Probably a Fire Hazard"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.instructions = tuple(input.decode_many("\n", Instruction.parse))

    async def part_one(self) -> str:
        return answer(lights_on(self.instructions))

    async def part_two(self) -> str:
        return answer(total_brightness(self.instructions))
