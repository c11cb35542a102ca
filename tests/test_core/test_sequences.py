"""Tests for the sliding-window helpers."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from advent.core.sequences import count_increases, windows


class TestWindows:
    def test_pairs(self) -> None:
        assert list(windows([1, 2, 3], 2)) == [(1, 2), (2, 3)]

    def test_triples(self) -> None:
        assert list(windows("abcd", 3)) == [("a", "b", "c"), ("b", "c", "d")]

    def test_shorter_than_window(self) -> None:
        assert list(windows([1, 2], 3)) == []

    def test_is_lazy(self) -> None:
        def numbers() -> Iterator[int]:
            n = 0
            while True:
                yield n
                n += 1

        it = windows(numbers(), 2)
        assert next(it) == (0, 1)
        assert next(it) == (1, 2)

    def test_rejects_non_positive_size(self) -> None:
        with pytest.raises(ValueError):
            list(windows([1], 0))


class TestCountIncreases:
    def test_depth_example(self) -> None:
        depths = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]
        assert count_increases(depths) == 7

    def test_flat(self) -> None:
        assert count_increases([4, 4, 4]) == 0

    def test_empty(self) -> None:
        assert count_increases([]) == 0
