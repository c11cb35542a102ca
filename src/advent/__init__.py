"""advent — daily puzzle solvers grouped by year.

Each puzzle day parses its input text and computes two answers.  Days are
registered per year and executed through a small async harness.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
