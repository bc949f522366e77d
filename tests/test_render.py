"""Type-directed rendering rules and size estimates."""

from __future__ import annotations

import sys
from decimal import Decimal
from enum import IntEnum
from fractions import Fraction

import pytest

from fastio.lib.render import (
    BOOL_RULE,
    BYTES_RULE,
    INT_RULE,
    OBJECT_RULE,
    TEXT_RULE,
    estimate_size,
    float_rule,
    render_value,
    rule_for,
)


class _Color(IntEnum):
    RED = 1


class _Point:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def test_bool_renders_as_words_not_digits() -> None:
    assert rule_for(True) is BOOL_RULE
    assert render_value(True) == "true"
    assert render_value(False) == "false"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (7, "7"),
        (-42, "-42"),
        (2**63 - 1, "9223372036854775807"),
        (-(2**63), "-9223372036854775808"),
        (10**30, "1" + "0" * 30),
    ],
)
def test_int_renders_minimal_decimal(value: int, expected: str) -> None:
    assert rule_for(value) is INT_RULE
    assert render_value(value) == expected


def test_int_subclass_renders_digits() -> None:
    assert render_value(_Color.RED) == "1"


@pytest.mark.parametrize("value", ["A", "", "plain text", "{braces} stay", "tab\there", "ünïcödé"])
def test_strings_render_verbatim(value: str) -> None:
    assert rule_for(value) is TEXT_RULE
    assert render_value(value) == value


def test_bytes_like_values_decode_as_utf8() -> None:
    assert rule_for(b"raw") is BYTES_RULE
    assert render_value(b"raw") == "raw"
    assert render_value(bytearray("é", "utf-8")) == "é"
    assert render_value(memoryview(b"view")) == "view"


def test_invalid_utf8_bytes_render_as_escapes() -> None:
    assert render_value(b"\xff\xfe") == "\\xff\\xfe"
    assert render_value(bytearray(b"ok\x80")) == "ok\\x80"


def test_format_accepts_invalid_utf8_bytes() -> None:
    from fastio.lib.driver import format as fastio_format

    assert fastio_format("[{}]", b"\xff\xfe") == "[\\xff\\xfe]"


def test_int_beyond_str_digit_limit_names_the_limit() -> None:
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(640)
    try:
        assert render_value(10**639) == "1" + "0" * 639
        with pytest.raises(ValueError, match="640-digit limit"):
            render_value(10**700)
    finally:
        sys.set_int_max_str_digits(previous)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3.14, "3.14"),
        (1.0, "1.0"),
        (-0.5, "-0.5"),
        (1e20, "1e+20"),
        (0.1 + 0.2, "0.30000000000000004"),
        (float("inf"), "inf"),
        (float("nan"), "nan"),
    ],
)
def test_float_default_uses_shortest_repr(value: float, expected: str) -> None:
    assert render_value(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3.14, "3.14"), (1234567.0, "1.23457e+06"), (100000.0, "100000"), (0.1 + 0.2, "0.3")],
)
def test_float_g_spec_matches_stream_insertion(value: float, expected: str) -> None:
    assert render_value(value, float_format="g") == expected


def test_float_rule_is_cached_per_spec() -> None:
    assert float_rule("g") is float_rule("g")
    assert float_rule("g") is not float_rule(".2f")
    assert rule_for(1.5, float_format=".2f").render(1.5) == "1.50"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, "None"), (Decimal("1.10"), "1.10"), (Fraction(1, 3), "1/3"), ([1, "a"], "[1, 'a']")],
)
def test_other_values_fall_back_to_str(value: object, expected: str) -> None:
    assert rule_for(value) is OBJECT_RULE
    assert render_value(value) == expected


def test_fallback_uses_custom_str() -> None:
    assert render_value(_Point(1, 2)) == "(1, 2)"


@pytest.mark.parametrize(
    "value",
    [0, 1, -1, 9, -9, 99, -99, 127, -128, 10**6, -(10**6), 2**31, -(2**63), 10**40, -(10**40)],
)
def test_int_estimate_never_underestimates(value: int) -> None:
    assert estimate_size(value) >= len(render_value(value))


def test_fixed_estimates() -> None:
    assert estimate_size(True) == 4
    assert estimate_size(False) == 5
    assert estimate_size("hello") == 5
    assert estimate_size("A") == 1
    assert estimate_size(b"abc") == 3
    assert estimate_size(2.5) == 24
    assert estimate_size(object()) == 32
