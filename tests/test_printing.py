"""print/println wrappers over text sinks."""

from __future__ import annotations

import io

import pytest

import fastio
from fastio.lib.config.settings import FastioConfig, FormatConfig, PrintConfig
from fastio.lib.errors import MissingArgument
from fastio.lib.printing import Printer


def test_println_writes_line() -> None:
    sink = io.StringIO()
    fastio.println("Hello, World!", file=sink)

    assert sink.getvalue() == "Hello, World!\n"


def test_print_concatenates_without_separator() -> None:
    sink = io.StringIO()
    fastio.print(42, "test", 3.14, file=sink)

    assert sink.getvalue() == "42test3.14"


def test_print_spaced_separates_values() -> None:
    sink = io.StringIO()
    fastio.print_spaced(42, "test", 3.14, file=sink)

    assert sink.getvalue() == "42 test 3.14"


def test_println_spaced_booleans_and_characters() -> None:
    sink = io.StringIO()
    fastio.println_spaced(True, False, file=sink)
    fastio.println_spaced("A", "B", "C", file=sink)

    assert sink.getvalue() == "true false\nA B C\n"


def test_print_booleans_without_spaces() -> None:
    sink = io.StringIO()
    fastio.print(True, False, file=sink)

    assert sink.getvalue() == "truefalse"


def test_print_spaced_custom_separator() -> None:
    sink = io.StringIO()
    fastio.print_spaced(1, 2, 3, file=sink, sep=", ")

    assert sink.getvalue() == "1, 2, 3"


def test_println_fmt_formats_then_terminates() -> None:
    sink = io.StringIO()
    fastio.println_fmt("{} + {} = {}", 2, 3, 5, file=sink)
    fastio.print_fmt("[{}]", "tail", file=sink)

    assert sink.getvalue() == "2 + 3 = 5\n[tail]"


def test_print_fmt_writes_nothing_on_error() -> None:
    sink = io.StringIO()

    with pytest.raises(MissingArgument):
        fastio.println_fmt("{} {}", 1, file=sink)
    assert sink.getvalue() == ""


def test_print_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    fastio.println("to stdout")

    assert capsys.readouterr().out == "to stdout\n"


def test_print_with_no_arguments() -> None:
    sink = io.StringIO()
    fastio.print(file=sink)
    fastio.println(file=sink)

    assert sink.getvalue() == "\n"


def test_printer_uses_config() -> None:
    printer = Printer(
        FastioConfig(
            format=FormatConfig(float_format=".2f"),
            printing=PrintConfig(separator="|", end="\r\n"),
        )
    )
    sink = io.StringIO()
    printer.println_spaced(1.5, "x", file=sink)
    printer.println_fmt("{}", 0.125, file=sink)

    assert sink.getvalue() == "1.50|x\r\n0.12\r\n"
