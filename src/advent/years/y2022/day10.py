"""2022 day 10 — cathode-ray tube signal and sprite rendering."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from advent.core.day import Day, answer
from advent.core.errors import ParseError
from advent.core.input import Input
from advent.grid.ocr import is_readable, recognise
from advent.grid.points import Grid, render_grid

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6
SAMPLE_CYCLES = (20, 60, 100, 140, 180, 220)


@dataclass(frozen=True)
class Instruction:
    """``noop`` (one cycle) or ``addx V`` (two cycles, then X += V)."""

    cycles: int
    delta: int = 0

    @classmethod
    def parse(cls, text: str) -> Instruction:
        parts = text.split()
        if parts == ["noop"]:
            return cls(cycles=1)
        if len(parts) == 2 and parts[0] == "addx":
            return cls(cycles=2, delta=int(parts[1]))
        raise ParseError(f"unknown instruction {text!r}")


def register_trace(program: tuple[Instruction, ...]) -> list[int]:
    """Value of X *during* each cycle; index 0 is cycle 1."""
    x = 1
    trace: list[int] = []
    for ins in program:
        trace.extend([x] * ins.cycles)
        x += ins.delta
    return trace


def signal_strength(trace: list[int], cycles: tuple[int, ...] = SAMPLE_CYCLES) -> int:
    """Sum of cycle number times X for each sampled cycle the program reaches."""
    return sum(c * trace[c - 1] for c in cycles if c <= len(trace))


def draw_screen(trace: list[int]) -> Grid:
    """Light each pixel whose column is within one of the sprite centre X."""
    pixels = SCREEN_WIDTH * SCREEN_HEIGHT
    xs = np.array(trace[:pixels], dtype=int)
    columns = np.arange(len(xs)) % SCREEN_WIDTH
    lit = np.zeros(pixels, dtype=bool)
    lit[: len(xs)] = np.abs(columns - xs) <= 1
    return lit.reshape(SCREEN_HEIGHT, SCREEN_WIDTH)


class Day10(Day):
    title = "Cathode-Ray Tube"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.program = tuple(input.decode_many("\n", Instruction.parse))

    async def part_one(self) -> str:
        return answer(signal_strength(register_trace(self.program)))

    async def part_two(self) -> str:
        screen = draw_screen(register_trace(self.program))
        letters = recognise(screen)
        return answer(letters if is_readable(letters) else render_grid(screen))
