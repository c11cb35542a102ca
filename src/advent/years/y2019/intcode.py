"""Minimal Intcode machine: add, multiply and halt."""

from __future__ import annotations

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)

OP_ADD = 1
OP_MUL = 2
OP_HALT = 99


class IntcodeError(ValueError):
    """The program did something the machine cannot execute."""


class Intcode:
    """Runs a program over a private copy of its memory."""

    def __init__(self, program: Sequence[int]) -> None:
        self.memory: list[int] = list(program)
        self.ip = 0
        self.halted = False

    def _read(self, address: int) -> int:
        if not 0 <= address < len(self.memory):
            raise IntcodeError(f"address {address} out of range (ip={self.ip})")
        return self.memory[address]

    def step(self) -> None:
        """Execute one instruction."""
        opcode = self._read(self.ip)
        if opcode == OP_HALT:
            self.halted = True
            return
        if opcode not in (OP_ADD, OP_MUL):
            raise IntcodeError(f"unknown opcode {opcode} at {self.ip}")

        a, b, dest = (self._read(self.ip + i) for i in (1, 2, 3))
        x, y = self._read(a), self._read(b)
        self._read(dest)
        self.memory[dest] = x + y if opcode == OP_ADD else x * y
        self.ip += 4

    def run(self) -> list[int]:
        """Run until halt and return the final memory."""
        while not self.halted:
            self.step()
        return self.memory


def run_with(program: Sequence[int], noun: int, verb: int) -> int:
    """Run *program* with addresses 1 and 2 replaced; return address 0."""
    memory = list(program)
    if len(memory) < 3:
        raise IntcodeError(f"program of {len(memory)} cell(s) has no noun and verb")
    memory[1], memory[2] = noun, verb
    return Intcode(memory).run()[0]
