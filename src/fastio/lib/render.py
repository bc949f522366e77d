"""Per-type rendering rules.

The rule set is closed: `rule_for()` picks one rule from the value's type
once, at capture time, and the driver only ever calls the rule it got.

- bool        -> "true" / "false"
- int         -> minimal decimal digits, leading "-" when negative
- str         -> verbatim (a one-character str covers the char case)
- bytes-like  -> decoded as UTF-8, verbatim; invalid bytes become backslash escapes
- float       -> format(value, float_format); "" is Python's shortest repr
- anything    -> str(value)

ints longer than `sys.get_int_max_str_digits()` digits (4300 by default)
cannot be rendered; the int rule raises `ValueError` naming that limit.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

BOOL_ESTIMATE_TRUE = 4
BOOL_ESTIMATE_FALSE = 5
FLOAT_ESTIMATE = 24
DEFAULT_ESTIMATE = 32


@dataclass(frozen=True, slots=True)
class RenderRule:
    """Render and size-estimate operations for one type category."""

    name: str
    render: Callable[[Any], str]
    estimate: Callable[[Any], int]


def _render_bool(value: bool) -> str:
    return "true" if value else "false"


def _estimate_bool(value: bool) -> int:
    return BOOL_ESTIMATE_TRUE if value else BOOL_ESTIMATE_FALSE


def _estimate_int(value: int) -> int:
    # log10(2) < 1/3, so bits // 3 + 1 digits plus one slot for the sign.
    return abs(value).bit_length() // 3 + 2


def _render_int(value: int) -> str:
    # int.__repr__ keeps IntEnum and other int subclasses as plain digits.
    try:
        return int.__repr__(value)
    except ValueError as exc:
        raise ValueError(
            f"Cannot render int with {value.bit_length()} bits: exceeds the "
            f"{sys.get_int_max_str_digits()}-digit limit of sys.set_int_max_str_digits()"
        ) from exc


def _render_bytes(value: bytes | bytearray | memoryview) -> str:
    return bytes(value).decode("utf-8", errors="backslashreplace")


def _estimate_len(value: Any) -> int:
    return len(value)


def _estimate_bytes(value: bytes | bytearray | memoryview) -> int:
    return memoryview(value).nbytes


def _estimate_float(_: float) -> int:
    return FLOAT_ESTIMATE


def _estimate_default(_: object) -> int:
    return DEFAULT_ESTIMATE


BOOL_RULE = RenderRule("bool", _render_bool, _estimate_bool)
INT_RULE = RenderRule("int", _render_int, _estimate_int)
TEXT_RULE = RenderRule("str", str.__str__, _estimate_len)
BYTES_RULE = RenderRule("bytes", _render_bytes, _estimate_bytes)
OBJECT_RULE = RenderRule("object", str, _estimate_default)


@lru_cache(maxsize=32)
def float_rule(float_format: str = "") -> RenderRule:
    """Return the float rule for one format spec (e.g. "" or "g")."""

    def _render_float(value: float) -> str:
        return format(value, float_format)

    return RenderRule("float", _render_float, _estimate_float)


def rule_for(value: object, *, float_format: str = "") -> RenderRule:
    """Select the rendering rule for *value*.

    bool is tested before int because bool is an int subclass.
    """

    if isinstance(value, bool):
        return BOOL_RULE
    if isinstance(value, int):
        return INT_RULE
    if isinstance(value, str):
        return TEXT_RULE
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BYTES_RULE
    if isinstance(value, float):
        return float_rule(float_format)
    return OBJECT_RULE


def render_value(value: object, *, float_format: str = "") -> str:
    """Render one value with the rule its type selects."""

    return rule_for(value, float_format=float_format).render(value)


def estimate_size(value: object, *, float_format: str = "") -> int:
    return rule_for(value, float_format=float_format).estimate(value)
