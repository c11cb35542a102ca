"""Grid helpers shared by puzzle days.

Provides integer points with fold reflections, numpy rendering of point sets
and sprite screens, and recognition of the block-letter font several
puzzles draw their answers in.
"""

from __future__ import annotations
