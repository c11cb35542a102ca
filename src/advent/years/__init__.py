"""Puzzle years.

Every subpackage defines one :class:`~advent.core.year.Year` subclass; the
registry imports them all on first use.
"""
