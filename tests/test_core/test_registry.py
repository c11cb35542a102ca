"""Tests for year discovery and (year, day) resolution."""

from __future__ import annotations

import pytest

from advent.core.day import Day
from advent.core.errors import DayNotFoundError
from advent.core.registry import (
    get_registry,
    get_year,
    list_day_schemas,
    reset_registry,
    resolve_day,
)
from advent.core.year import Year

EXPECTED = {
    2015: [2, 6],
    2018: [1],
    2019: [1, 2, 4, 6],
    2021: [1, 13],
    2022: [6, 10, 25],
}


class TestDiscovery:
    def test_all_years_found(self, fresh_registry) -> None:
        registry = get_registry()
        assert sorted(registry) == sorted(EXPECTED)
        for year, numbers in EXPECTED.items():
            assert isinstance(registry[year], Year)
            assert registry[year].numbers() == numbers

    def test_registry_is_cached(self, fresh_registry) -> None:
        assert get_registry() is get_registry()

    def test_reset_rediscovers(self, fresh_registry) -> None:
        first = get_registry()
        reset_registry()
        assert get_registry() is not first

    def test_schemas(self, fresh_registry) -> None:
        schemas = list_day_schemas()
        assert {"year": 2021, "day": 13, "title": "Transparent Origami"} in schemas
        assert len(schemas) == sum(len(v) for v in EXPECTED.values())


class TestResolution:
    @pytest.mark.parametrize(
        ("year", "day"),
        [(y, d) for y, days in EXPECTED.items() for d in days],
    )
    def test_every_registered_day_resolves(self, year: int, day: int) -> None:
        day_cls = resolve_day(year, day)
        assert issubclass(day_cls, Day)
        assert day_cls.year == year
        assert day_cls.number == day
        assert day_cls.title

    def test_unknown_day(self) -> None:
        with pytest.raises(DayNotFoundError) as info:
            resolve_day(2021, 2)
        assert (info.value.year, info.value.day) == (2021, 2)

    def test_unknown_year(self) -> None:
        with pytest.raises(DayNotFoundError) as info:
            get_year(1900)
        assert info.value.day is None
        assert "1900" in str(info.value)
