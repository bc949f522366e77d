"""Token and line readers."""

from __future__ import annotations

import gc
import io

import pytest

import fastio.lib.reading as reading
from fastio.lib.reading import TokenReader, parse_bool, parse_int


@pytest.mark.parametrize(("text", "expected"), [("0", 0), ("42", 42), ("-7", -7), ("007", 7)])
def test_parse_int_accepts_decimal(text: str, expected: int) -> None:
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "-", "+5", " 5", "5 ", "1.0", "0x10", "1_000", "abc"])
def test_parse_int_rejects_non_decimal(text: str) -> None:
    with pytest.raises(ValueError, match="Failed to parse integer"):
        parse_int(text)


@pytest.mark.parametrize(
    ("text", "expected"), [("true", True), ("TRUE", True), ("1", True), ("false", False), ("0", False)]
)
def test_parse_bool(text: str, expected: bool) -> None:
    assert parse_bool(text) is expected


def test_parse_bool_rejects_other_words() -> None:
    with pytest.raises(ValueError, match="Failed to parse boolean"):
        parse_bool("yes")


def test_reader_reads_typed_tokens_across_lines() -> None:
    reader = TokenReader(io.StringIO("3 4.5\n  word\n\ntrue\n"))

    assert reader.read(int) == 3
    assert reader.read(float) == 4.5
    assert reader.read() == "word"
    assert reader.read(bool) is True


def test_read_many_returns_tuple() -> None:
    reader = TokenReader(io.StringIO("1 2 three"))

    assert reader.read_many(int, int, str) == (1, 2, "three")


def test_read_past_end_raises_eof() -> None:
    reader = TokenReader(io.StringIO("only\n"))
    reader.read()

    with pytest.raises(EOFError):
        reader.read()


def test_unsupported_type_raises() -> None:
    reader = TokenReader(io.StringIO("x"))

    with pytest.raises(TypeError, match="Unsupported input type"):
        reader.read(list)


def test_readline_returns_rest_of_current_line() -> None:
    reader = TokenReader(io.StringIO("10 rest of line\nnext line\n"))

    assert reader.read(int) == 10
    assert reader.readline() == " rest of line"
    assert reader.readline() == "next line"
    assert reader.readline() == ""


def test_readline_strips_windows_terminators() -> None:
    reader = TokenReader(io.StringIO("first\r\nsecond"))

    assert reader.readline() == "first"
    assert reader.readline() == "second"


def test_module_helpers_reuse_reader_per_stream() -> None:
    stream = io.StringIO("5 6\nhello world\n")

    assert reading.read(int, stream=stream) == 5
    assert reading.read(int, stream=stream) == 6
    assert reading.readline(stream=stream) == ""
    assert reading.readline(stream=stream) == "hello world"


def test_module_read_with_several_types() -> None:
    stream = io.StringIO("1 2.0 x")

    assert reading.read(int, float, str, stream=stream) == (1, 2.0, "x")


def test_module_read_defaults_to_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("from-stdin\n"))

    assert reading.read() == "from-stdin"


def test_module_helpers_do_not_retain_finished_streams() -> None:
    gc.collect()
    before = len(reading._READERS)

    for value in range(100):
        assert reading.read(int, stream=io.StringIO(f"{value}\n")) == value
        assert reading.readline(stream=io.StringIO("line\n")) == "line"
    gc.collect()

    assert len(reading._READERS) == before


def test_module_helpers_keep_state_while_stream_is_alive() -> None:
    stream = io.StringIO("1 2 3\n")

    assert reading.read(int, stream=stream) == 1
    gc.collect()
    assert reading.read(int, int, stream=stream) == (2, 3)
