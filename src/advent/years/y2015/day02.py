"""2015 day 2 — wrapping paper and ribbon for rectangular presents."""

from __future__ import annotations

from dataclasses import dataclass

from advent.core.day import Day, answer
from advent.core.errors import ParseError
from advent.core.input import Input


@dataclass(frozen=True)
class Present:
    """A box with integer length, width and height."""

    length: int
    width: int
    height: int

    @classmethod
    def parse(cls, text: str) -> Present:
        """Parse ``"LxWxH"``."""
        parts = text.strip().split("x")
        if len(parts) != 3:
            raise ParseError(f"expected LxWxH, got {text!r}")
        try:
            length, width, height = (int(p) for p in parts)
        except ValueError as exc:
            raise ParseError(f"non-integer dimension in {text!r}") from exc
        if min(length, width, height) <= 0:
            raise ParseError(f"dimensions must be positive: {text!r}")
        return cls(length=length, width=width, height=height)

    @property
    def surface_area(self) -> int:
        """Box surface plus the area of its smallest face as slack."""
        faces = (self.length * self.width, self.width * self.height, self.height * self.length)
        return 2 * sum(faces) + min(faces)

    @property
    def ribbon_length(self) -> int:
        """Smallest face perimeter plus the volume for the bow."""
        perimeters = (
            2 * (self.length + self.width),
            2 * (self.width + self.height),
            2 * (self.height + self.length),
        )
        return min(perimeters) + self.length * self.width * self.height


class Day2(Day):
    title = "I Was Told There Would Be No Math"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.presents: tuple[Present, ...] = tuple(input.decode_many("\n", Present.parse))

    async def part_one(self) -> str:
        return answer(sum(p.surface_area for p in self.presents))

    async def part_two(self) -> str:
        return answer(sum(p.ribbon_length for p in self.presents))
