"""print/println wrappers that write rendered values to a text sink.

The wrappers never open or close the sink; they only call `write()`.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol

from fastio.lib.config.settings import FastioConfig
from fastio.lib.driver import Formatter
from fastio.lib.render import render_value

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fastio.lib.template import Template


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


class Printer:
    """Write values or formatted templates to a sink using one config."""

    def __init__(self, config: FastioConfig | None = None) -> None:
        self.config = config or FastioConfig()
        self.formatter = Formatter(self.config.format)

    def _render_all(self, args: Iterable[object]) -> list[str]:
        float_format = self.config.format.float_format
        return [render_value(arg, float_format=float_format) for arg in args]

    def print(self, *args: object, file: TextSink | None = None) -> None:
        sink = sys.stdout if file is None else file
        sink.write("".join(self._render_all(args)))

    def println(self, *args: object, file: TextSink | None = None) -> None:
        sink = sys.stdout if file is None else file
        sink.write("".join(self._render_all(args)) + self.config.printing.end)

    def print_spaced(
        self,
        *args: object,
        file: TextSink | None = None,
        sep: str | None = None,
    ) -> None:
        sink = sys.stdout if file is None else file
        separator = self.config.printing.separator if sep is None else sep
        sink.write(separator.join(self._render_all(args)))

    def println_spaced(
        self,
        *args: object,
        file: TextSink | None = None,
        sep: str | None = None,
    ) -> None:
        sink = sys.stdout if file is None else file
        separator = self.config.printing.separator if sep is None else sep
        sink.write(separator.join(self._render_all(args)) + self.config.printing.end)

    def print_fmt(
        self,
        template: Template | str,
        *args: object,
        file: TextSink | None = None,
    ) -> None:
        # Format first so a failing call writes nothing.
        text = self.formatter.vformat(template, args)
        (sys.stdout if file is None else file).write(text)

    def println_fmt(
        self,
        template: Template | str,
        *args: object,
        file: TextSink | None = None,
    ) -> None:
        text = self.formatter.vformat(template, args)
        (sys.stdout if file is None else file).write(text + self.config.printing.end)


_DEFAULT_PRINTER = Printer()

print = _DEFAULT_PRINTER.print  # noqa: A001
println = _DEFAULT_PRINTER.println
print_spaced = _DEFAULT_PRINTER.print_spaced
println_spaced = _DEFAULT_PRINTER.println_spaced
print_fmt = _DEFAULT_PRINTER.print_fmt
println_fmt = _DEFAULT_PRINTER.println_fmt
