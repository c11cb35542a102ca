"""2-D integer points, fold reflections and numpy rendering."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

Grid = np.ndarray  # 2D boolean array, True = lit / dot present


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class Point2:
    """An integer point; ``x`` grows right, ``y`` grows down."""

    x: int
    y: int


class Axis(str, enum.Enum):
    X = "x"
    Y = "y"


@dataclass(frozen=True)
class Fold:
    """Reflection of every point beyond ``position`` on ``axis`` back over it."""

    axis: Axis
    position: int

    def apply(self, point: Point2) -> Point2:
        """Reflect *point* if it lies past the fold line; otherwise return it."""
        if self.axis is Axis.X and point.x > self.position:
            return Point2(2 * self.position - point.x, point.y)
        if self.axis is Axis.Y and point.y > self.position:
            return Point2(point.x, 2 * self.position - point.y)
        return point


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


def fold_points(points: Iterable[Point2], fold: Fold) -> frozenset[Point2]:
    """Fold a point set; reflected points merge with any already there."""
    return frozenset(fold.apply(p) for p in points)


def points_to_grid(points: Iterable[Point2], origin: Point2 | None = None) -> Grid:
    """Rasterise points into a boolean grid.

    The grid's top-left cell is *origin*, or the minimum corner of the
    points when no origin is given.  Points left of or above the origin are
    rejected.
    """
    pts = list(points)
    if not pts:
        return np.zeros((0, 0), dtype=bool)
    xs = np.array([p.x for p in pts])
    ys = np.array([p.y for p in pts])
    x0, y0 = (int(xs.min()), int(ys.min())) if origin is None else (origin.x, origin.y)
    if xs.min() < x0 or ys.min() < y0:
        raise ValueError(f"points extend beyond origin ({x0}, {y0})")
    grid = np.zeros((ys.max() - y0 + 1, xs.max() - x0 + 1), dtype=bool)
    grid[ys - y0, xs - x0] = True
    return grid


def render_grid(grid: Grid, on: str = "#", off: str = ".") -> str:
    """Render a boolean grid as text rows."""
    return "\n".join(
        "".join(on if cell else off for cell in row) for row in grid
    )
