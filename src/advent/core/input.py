"""Puzzle input loading and decoding.

An :class:`Input` wraps the raw text of one puzzle and offers three decode
helpers:

* :meth:`Input.decode` — parse the whole text as one value, strictly.
* :meth:`Input.try_decode` — same, but ``None`` on failure.
* :meth:`Input.decode_many` — split on a separator and parse each chunk,
  dropping (or rejecting) chunks that fail to parse.

Parsers are plain callables ``parse(text) -> value`` that raise
``ValueError`` (usually :class:`~advent.core.errors.ParseError`) when the
text does not describe a valid value.  ``int`` is a valid parser.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, TypeVar

from advent.core.errors import InputNotFoundError, MalformedInputError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Parser = Callable[[str], T]


class ElementErrorPolicy(str, enum.Enum):
    """What ``decode_many`` does with a chunk whose parser raises."""

    DROP = "drop"
    FAIL = "fail"


def input_path(inputs_dir: Path, year: int, day: int) -> Path:
    """Conventional location of a day's input: ``<dir>/<year>/dayNN.txt``."""
    return inputs_dir / str(year) / f"day{day:02d}.txt"


@dataclass(frozen=True)
class Input:
    """Raw text payload for one (year, day)."""

    text: str
    year: int | None = None
    day: int | None = None

    @classmethod
    def load(cls, year: int, day: int, inputs_dir: Path | None = None) -> Input:
        """Read the input file for *year*/*day* from *inputs_dir*.

        Falls back to ``settings.inputs_dir`` when no directory is given.
        Trailing newlines are stripped.
        """
        if inputs_dir is None:
            from advent.config.settings import get_settings

            inputs_dir = get_settings().inputs_dir

        path = input_path(inputs_dir, year, day)
        if not path.is_file():
            raise InputNotFoundError(year, day, path)
        text = path.read_text(encoding="utf-8").rstrip("\n")
        logger.debug("Loaded %d chars of input from %s", len(text), path)
        return cls(text=text, year=year, day=day)

    # -- decoding -----------------------------------------------------------

    def decode(self, parse: Parser[T]) -> T:
        """Parse the entire text as a single value.

        Raises :class:`MalformedInputError` if *parse* raises ``ValueError``.
        """
        try:
            return parse(self.text)
        except ValueError as exc:
            raise MalformedInputError(str(exc), self.year, self.day) from exc

    def try_decode(self, parse: Parser[T]) -> T | None:
        """Parse the entire text, returning ``None`` instead of raising."""
        try:
            return parse(self.text)
        except ValueError as exc:
            logger.debug("Decode failed for %s/%s: %s", self.year, self.day, exc)
            return None

    def decode_many(
        self,
        separator: str = "\n",
        transform: Parser[T] = str,  # type: ignore[assignment]
        on_element_error: ElementErrorPolicy | str | None = None,
    ) -> list[T]:
        """Split on *separator* and parse each non-empty chunk with *transform*.

        Chunks are stripped of surrounding whitespace before parsing.  With
        the ``drop`` policy (the default, see ``ADVENT_ELEMENT_ERROR_POLICY``)
        chunks that fail to parse are skipped and the order of the rest is
        kept.  With ``fail`` the first bad chunk raises
        :class:`MalformedInputError`.
        """
        if on_element_error is None:
            from advent.config.settings import get_settings

            on_element_error = get_settings().element_error_policy
        policy = ElementErrorPolicy(on_element_error)

        values: list[T] = []
        dropped = 0
        for index, chunk in enumerate(self.text.split(separator)):
            chunk = chunk.strip()
            if not chunk:
                continue
            try:
                values.append(transform(chunk))
            except ValueError as exc:
                if policy is ElementErrorPolicy.FAIL:
                    raise MalformedInputError(
                        f"element {index} ({chunk[:40]!r}) is invalid: {exc}",
                        self.year,
                        self.day,
                    ) from exc
                dropped += 1

        if dropped:
            logger.debug("Dropped %d unparseable element(s) from %s/%s", dropped, self.year, self.day)
        return values

    def lines(self) -> list[str]:
        """Non-empty, stripped lines of the text."""
        return self.decode_many("\n")
