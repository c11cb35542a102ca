"""Year registry — auto-discover every implemented puzzle year.

Provides :func:`get_registry` which lazily imports every subpackage of
``advent.years``, collects the :class:`~advent.core.year.Year` subclasses
defined there, and exposes one instance per year keyed by the year number.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil

from advent.core.day import Day
from advent.core.errors import DayNotFoundError
from advent.core.year import Year

logger = logging.getLogger(__name__)

_registry: dict[int, Year] | None = None


def _discover_years() -> dict[int, Year]:
    """Import all modules in ``advent.years`` and collect Year subclasses."""
    import advent.years as pkg

    registry: dict[int, Year] = {}

    for _finder, mod_name, _is_pkg in pkgutil.iter_modules(pkg.__path__):
        module = importlib.import_module(f"advent.years.{mod_name}")
        for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
            if issubclass(obj, Year) and obj is not Year and obj.__module__ == module.__name__:
                if obj.year in registry:
                    raise ValueError(f"Year {obj.year} registered twice ({obj.__name__})")
                registry[obj.year] = obj()

    logger.debug("Discovered years: %s", sorted(registry))
    return dict(sorted(registry.items()))


def get_registry() -> dict[int, Year]:
    """Return the year registry (lazily discovered)."""
    global _registry  # noqa: PLW0603
    if _registry is None:
        _registry = _discover_years()
    return _registry


def reset_registry() -> None:
    """Force re-discovery on next :func:`get_registry` call."""
    global _registry  # noqa: PLW0603
    _registry = None


def get_year(year: int) -> Year:
    """Look up a year, raising :class:`DayNotFoundError` if it has no days."""
    found = get_registry().get(year)
    if found is None:
        raise DayNotFoundError(year)
    return found


def resolve_day(year: int, day: int) -> type[Day]:
    """Return the day class registered for (*year*, *day*)."""
    return get_year(year).resolve(day)


def list_day_schemas() -> list[dict[str, object]]:
    """Return JSON-serialisable descriptions of every registered day."""
    return [
        day_cls.to_schema()
        for year in get_registry().values()
        for day_cls in year.days.values()
    ]
