"""Small iteration helpers shared by several days."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def windows(iterable: Iterable[T], size: int) -> Iterator[tuple[T, ...]]:
    """Yield overlapping windows of *size* consecutive items, lazily and in order.

    ``windows([1, 2, 3, 4], 3)`` yields ``(1, 2, 3)`` then ``(2, 3, 4)``.
    Nothing is yielded when the input is shorter than *size*.
    """
    if size < 1:
        raise ValueError(f"window size must be positive, got {size}")
    window: deque[T] = deque(maxlen=size)
    for item in iterable:
        window.append(item)
        if len(window) == size:
            yield tuple(window)


def count_increases(values: Iterable[int]) -> int:
    """Number of adjacent pairs where the later value is larger."""
    return sum(1 for first, last in windows(values, 2) if last > first)
