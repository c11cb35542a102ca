"""2021 day 13 — folding transparent paper to reveal a code."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import reduce

from advent.core.day import Day, answer
from advent.core.errors import ParseError
from advent.core.input import Input
from advent.grid.ocr import is_readable, recognise
from advent.grid.points import Axis, Fold, Point2, fold_points, points_to_grid, render_grid

logger = logging.getLogger(__name__)

_FOLD_PATTERN = re.compile(r"^fold along ([xy])=(\d+)$")


def parse_fold(text: str) -> Fold:
    """Parse ``"fold along x=5"``."""
    match = _FOLD_PATTERN.match(text.strip())
    if match is None:
        raise ParseError(f"not a fold instruction: {text!r}")
    return Fold(Axis(match.group(1)), int(match.group(2)))


def parse_dot(text: str) -> Point2:
    """Parse ``"x,y"``."""
    parts = text.strip().split(",")
    if len(parts) != 2:
        raise ParseError(f"expected x,y, got {text!r}")
    return Point2(int(parts[0]), int(parts[1]))


@dataclass(frozen=True)
class TransparentPaper:
    """Dots on the sheet plus the fold instructions, not yet applied."""

    dots: frozenset[Point2]
    folds: tuple[Fold, ...]

    @classmethod
    def parse(cls, text: str) -> TransparentPaper:
        """Parse the dot list and fold list, separated by a blank line.

        Lines in either section that do not parse are skipped; the paper is
        rejected only if either section ends up empty.
        """
        sections = text.strip().split("\n\n")
        if len(sections) != 2:
            raise ParseError("expected dots and folds separated by a blank line")
        dots = frozenset(Input(sections[0]).decode_many("\n", parse_dot, on_element_error="drop"))
        folds = tuple(Input(sections[1]).decode_many("\n", parse_fold, on_element_error="drop"))
        if not dots or not folds:
            raise ParseError("paper needs at least one dot and one fold")
        return cls(dots, folds)

    def fold(self, count: int | None = None) -> frozenset[Point2]:
        """Dots after applying the first *count* folds (all when ``None``)."""
        folds = self.folds if count is None else self.folds[:count]
        return reduce(fold_points, folds, self.dots)


class Day13(Day):
    title = "Transparent Origami"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.paper = input.decode(TransparentPaper.parse)

    async def part_one(self) -> str:
        return answer(len(self.paper.fold(1)))

    async def part_two(self) -> str:
        dots = self.paper.fold()
        # Dots folded past the left or top edge extend the sheet.
        origin = Point2(min(0, *(p.x for p in dots)), min(0, *(p.y for p in dots)))
        grid = points_to_grid(dots, origin=origin)
        code = recognise(grid)
        if is_readable(code):
            return answer(code)
        logger.debug("Folded dots are not letters; returning the picture")
        return answer(render_grid(grid))
