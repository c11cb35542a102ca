"""2022 day 25 — full of hot air: balanced base-five SNAFU numbers."""

from __future__ import annotations

from advent.core.day import Day, answer
from advent.core.errors import ParseError
from advent.core.input import Input

_DIGITS = {"=": -2, "-": -1, "0": 0, "1": 1, "2": 2}
_SYMBOLS = {value: symbol for symbol, value in _DIGITS.items()}


def snafu_to_int(text: str) -> int:
    """Decode a SNAFU numeral."""
    text = text.strip()
    if not text:
        raise ParseError("empty SNAFU number")
    value = 0
    for symbol in text:
        digit = _DIGITS.get(symbol)
        if digit is None:
            raise ParseError(f"invalid SNAFU digit {symbol!r} in {text!r}")
        value = value * 5 + digit
    return value


def int_to_snafu(value: int) -> str:
    """Encode a non-negative integer as a SNAFU numeral."""
    if value < 0:
        raise ValueError("SNAFU encoding of negative numbers is not supported")
    if value == 0:
        return "0"
    symbols: list[str] = []
    while value:
        remainder = value % 5
        if remainder > 2:
            remainder -= 5
        symbols.append(_SYMBOLS[remainder])
        value = (value - remainder) // 5
    return "".join(reversed(symbols))


class Day25(Day):
    title = "Full of Hot Air"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.numbers: tuple[int, ...] = tuple(input.decode_many("\n", snafu_to_int))

    async def part_one(self) -> str:
        return answer(int_to_snafu(sum(self.numbers)))

    async def part_two(self) -> str:
        # The last day has only one puzzle.
        return answer(None)
