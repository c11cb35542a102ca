"""Recognition of the 4x6 block-letter font drawn by several puzzles.

Letters are four cells wide and six tall, laid out on a five-column pitch
(one blank column between letters)::

    .##..###.
    #..#.#..#
    #..#.###.
    ####.#..#
    #..#.#..#
    #..#.###.

reads as ``"AB"``.
"""

from __future__ import annotations

import logging

import numpy as np

from advent.grid.points import Grid, render_grid

logger = logging.getLogger(__name__)

GLYPH_WIDTH = 4
GLYPH_HEIGHT = 6
GLYPH_PITCH = GLYPH_WIDTH + 1
UNKNOWN = "?"

_FONT: dict[str, str] = {
    ".##.\n#..#\n#..#\n####\n#..#\n#..#": "A",
    "###.\n#..#\n###.\n#..#\n#..#\n###.": "B",
    ".##.\n#..#\n#...\n#...\n#..#\n.##.": "C",
    "####\n#...\n###.\n#...\n#...\n####": "E",
    "####\n#...\n###.\n#...\n#...\n#...": "F",
    ".##.\n#..#\n#...\n#.##\n#..#\n.###": "G",
    "#..#\n#..#\n####\n#..#\n#..#\n#..#": "H",
    ".###\n..#.\n..#.\n..#.\n..#.\n.###": "I",
    "..##\n...#\n...#\n...#\n#..#\n.##.": "J",
    "#..#\n#.#.\n##..\n#.#.\n#.#.\n#..#": "K",
    "#...\n#...\n#...\n#...\n#...\n####": "L",
    ".##.\n#..#\n#..#\n#..#\n#..#\n.##.": "O",
    "###.\n#..#\n#..#\n###.\n#...\n#...": "P",
    "###.\n#..#\n#..#\n###.\n#.#.\n#..#": "R",
    ".###\n#...\n#...\n.##.\n...#\n###.": "S",
    "#..#\n#..#\n#..#\n#..#\n#..#\n.##.": "U",
    "####\n...#\n..#.\n.#..\n#...\n####": "Z",
}

LETTERS: dict[str, str] = {letter: glyph for glyph, letter in _FONT.items()}


def _pad(grid: Grid) -> Grid:
    """Pad to six rows and a whole number of glyph cells."""
    h, w = grid.shape
    cells = max(1, -(-(w + 1) // GLYPH_PITCH))
    target_w = cells * GLYPH_PITCH
    return np.pad(grid, ((0, max(0, GLYPH_HEIGHT - h)), (0, target_w - w)), constant_values=False)


def split_glyphs(grid: Grid) -> list[Grid]:
    """Cut a letter picture into per-letter 4x6 cells."""
    padded = _pad(np.asarray(grid, dtype=bool))
    return [
        padded[:, start:start + GLYPH_WIDTH]
        for start in range(0, padded.shape[1], GLYPH_PITCH)
    ]


def recognise(grid: Grid) -> str:
    """Read the letters drawn in *grid*.

    Blank cells become spaces and are trimmed from the ends; shapes that are
    not in the font (or pictures taller than six rows) become ``"?"``.
    """
    grid = np.asarray(grid, dtype=bool)
    if grid.size == 0:
        return ""
    if grid.shape[0] > GLYPH_HEIGHT:
        logger.debug("Picture is %d rows tall; not a letter line", grid.shape[0])
        return UNKNOWN

    chars: list[str] = []
    for glyph in split_glyphs(grid):
        if not glyph.any():
            chars.append(" ")
            continue
        chars.append(_FONT.get(render_grid(glyph), UNKNOWN))
    return "".join(chars).strip()


def is_readable(text: str) -> bool:
    """True when every recognised glyph was a known letter."""
    return bool(text) and UNKNOWN not in text
