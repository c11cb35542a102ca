"""Tests for block-letter recognition."""

from __future__ import annotations

import numpy as np

from advent.grid.ocr import GLYPH_HEIGHT, LETTERS, UNKNOWN, is_readable, recognise, split_glyphs


def _picture(word: str) -> np.ndarray:
    """Draw *word* in the block font, one blank column between letters."""
    rows = [""] * GLYPH_HEIGHT
    for i, letter in enumerate(word):
        glyph_rows = LETTERS[letter].split("\n")
        for r in range(GLYPH_HEIGHT):
            rows[r] += ("." if i else "") + glyph_rows[r]
    return np.array([[c == "#" for c in row] for row in rows])


class TestRecognise:
    def test_docstring_example(self) -> None:
        picture = np.array([
            [c == "#" for c in row]
            for row in [
                ".##..###.",
                "#..#.#..#",
                "#..#.###.",
                "####.#..#",
                "#..#.#..#",
                "#..#.###.",
            ]
        ])
        assert recognise(picture) == "AB"

    def test_every_letter(self) -> None:
        word = "".join(sorted(LETTERS))
        assert recognise(_picture(word)) == word

    def test_word_with_leading_blank_column(self) -> None:
        # I and J start with empty columns; the pitch must still line up.
        assert recognise(_picture("JIZ")) == "JIZ"

    def test_trailing_padding_ignored(self) -> None:
        picture = np.pad(_picture("HE"), ((0, 0), (0, 12)), constant_values=False)
        assert recognise(picture) == "HE"

    def test_unknown_shape(self) -> None:
        square = np.ones((5, 5), dtype=bool)
        text = recognise(square)
        assert UNKNOWN in text
        assert not is_readable(text)

    def test_too_tall(self) -> None:
        assert recognise(np.ones((7, 4), dtype=bool)) == UNKNOWN

    def test_empty(self) -> None:
        assert recognise(np.zeros((0, 0), dtype=bool)) == ""


class TestSplitGlyphs:
    def test_cell_count_and_shape(self) -> None:
        glyphs = split_glyphs(_picture("EPJ"))
        assert len(glyphs) == 3
        assert all(g.shape == (GLYPH_HEIGHT, 4) for g in glyphs)


class TestIsReadable:
    def test_letters(self) -> None:
        assert is_readable("EPJBRKAH")

    def test_empty(self) -> None:
        assert not is_readable("")
