"""2019 day 4 — counting passwords that fit the remembered rules."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import groupby

from advent.core.day import Day, answer
from advent.core.errors import ParseError
from advent.core.input import Input

PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class PasswordRange:
    """Inclusive range of candidate passwords."""

    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> PasswordRange:
        """Parse ``"start-end"``."""
        parts = text.strip().split("-")
        if len(parts) != 2:
            raise ParseError(f"expected start-end, got {text!r}")
        start, end = (int(p) for p in parts)
        if start > end:
            raise ParseError(f"empty range {text!r}")
        return cls(start, end)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))


def _run_lengths(candidate: int) -> list[int] | None:
    """Lengths of equal-digit runs, or ``None`` if the rules already fail."""
    digits = str(candidate)
    if len(digits) != PASSWORD_LENGTH:
        return None
    if any(b < a for a, b in zip(digits, digits[1:])):
        return None
    return [len(list(group)) for _, group in groupby(digits)]


def is_valid(candidate: int) -> bool:
    """Six digits, never decreasing, with at least two equal neighbours."""
    runs = _run_lengths(candidate)
    return runs is not None and max(runs) >= 2


def is_valid_strict(candidate: int) -> bool:
    """Like :func:`is_valid`, but some equal run must be exactly two long."""
    runs = _run_lengths(candidate)
    return runs is not None and 2 in runs


class Day4(Day):
    title = "Secure Container"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.range = input.decode(PasswordRange.parse)

    async def part_one(self) -> str:
        return answer(sum(1 for c in self.range if is_valid(c)))

    async def part_two(self) -> str:
        return answer(sum(1 for c in self.range if is_valid_strict(c)))
