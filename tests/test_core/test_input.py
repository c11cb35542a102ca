"""Tests for puzzle input loading and decoding."""

from __future__ import annotations

from pathlib import Path

import pytest

from advent.core.errors import InputNotFoundError, MalformedInputError, ParseError
from advent.core.input import ElementErrorPolicy, Input, input_path


def _parse_pair(text: str) -> tuple[int, int]:
    left, sep, right = text.partition(",")
    if not sep:
        raise ParseError(f"no comma in {text!r}")
    return int(left), int(right)


class TestInputPath:
    def test_zero_padded_day(self, tmp_path: Path) -> None:
        assert input_path(tmp_path, 2021, 3) == tmp_path / "2021" / "day03.txt"

    def test_two_digit_day(self, tmp_path: Path) -> None:
        assert input_path(tmp_path, 2019, 25).name == "day25.txt"


class TestLoad:
    def test_reads_and_strips_trailing_newlines(self, write_input, inputs_dir: Path) -> None:
        write_input(2019, 1, "12\n14\n\n")
        loaded = Input.load(2019, 1, inputs_dir)
        assert loaded.text == "12\n14"
        assert loaded.year == 2019
        assert loaded.day == 1

    def test_missing_file(self, inputs_dir: Path) -> None:
        with pytest.raises(InputNotFoundError) as info:
            Input.load(2019, 7, inputs_dir)
        assert info.value.year == 2019
        assert info.value.day == 7
        assert info.value.path == inputs_dir / "2019" / "day07.txt"

    def test_defaults_to_settings_dir(self, write_input, inputs_dir: Path, monkeypatch) -> None:
        from advent.config.settings import get_settings

        monkeypatch.setattr(get_settings(), "inputs_dir", inputs_dir)
        write_input(2018, 1, "+1")
        assert Input.load(2018, 1).text == "+1"


class TestDecode:
    def test_single_value(self) -> None:
        assert Input("3,4").decode(_parse_pair) == (3, 4)

    def test_failure_is_malformed_input(self) -> None:
        with pytest.raises(MalformedInputError):
            Input("34", year=2021, day=13).decode(_parse_pair)

    def test_failure_message_names_the_day(self) -> None:
        with pytest.raises(MalformedInputError, match="2021 day 13"):
            Input("34", year=2021, day=13).decode(_parse_pair)

    def test_plain_value_error_is_also_malformed(self) -> None:
        with pytest.raises(MalformedInputError):
            Input("abc").decode(int)

    def test_try_decode_returns_none(self) -> None:
        assert Input("nope").try_decode(int) is None
        assert Input("42").try_decode(int) == 42


class TestDecodeMany:
    def test_default_separator_and_transform(self) -> None:
        assert Input("a\nb\nc").decode_many() == ["a", "b", "c"]

    def test_custom_separator(self) -> None:
        assert Input("1,0,0,3,99").decode_many(",", int) == [1, 0, 0, 3, 99]

    def test_skips_empty_chunks(self) -> None:
        assert Input("1\n\n2\n").decode_many("\n", int) == [1, 2]

    def test_strips_whitespace(self) -> None:
        assert Input(" 1 , 2 ,3 ").decode_many(",", int) == [1, 2, 3]

    def test_drops_malformed_and_keeps_order(self) -> None:
        values = Input("5\nx\n3\n7y\n9").decode_many("\n", int, on_element_error="drop")
        assert values == [5, 3, 9]

    def test_drop_is_the_default(self) -> None:
        assert Input("1\noops\n2").decode_many("\n", int) == [1, 2]

    def test_fail_policy_raises(self) -> None:
        with pytest.raises(MalformedInputError, match="element 1"):
            Input("1\noops\n2").decode_many("\n", int, on_element_error=ElementErrorPolicy.FAIL)

    def test_default_policy_comes_from_settings(self, monkeypatch) -> None:
        from advent.config.settings import get_settings

        monkeypatch.setattr(get_settings(), "element_error_policy", "fail")
        with pytest.raises(MalformedInputError):
            Input("1\noops").decode_many("\n", int)

    def test_unknown_policy(self) -> None:
        with pytest.raises(ValueError):
            Input("1").decode_many("\n", int, on_element_error="ignore")

    def test_idempotent(self) -> None:
        source = Input("3,4\n1,2\nbad\n5,6")
        first = source.decode_many("\n", _parse_pair)
        second = source.decode_many("\n", _parse_pair)
        assert first == second == [(3, 4), (1, 2), (5, 6)]

    def test_lines(self) -> None:
        assert Input("  ab \n\ncd").lines() == ["ab", "cd"]
