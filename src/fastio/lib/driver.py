"""Placeholder substitution and the formatting entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastio.lib.buffer import OutputBuffer
from fastio.lib.capture import ArgumentList
from fastio.lib.config.settings import FormatConfig
from fastio.lib.errors import MissingArgument
from fastio.lib.scan import SegmentKind, iter_segments
from fastio.lib.template import Template, make_template_cache

if TYPE_CHECKING:
    from collections.abc import Sequence


def substitute(text: str, args: ArgumentList, buffer: OutputBuffer) -> int:
    """Write *text* into *buffer* with placeholders filled from *args*.

    Placeholders take arguments strictly in call order; extra arguments are
    left unused. Returns the number of placeholders filled.
    """

    arg_index = 0
    supplied = len(args)
    for segment in iter_segments(text):
        if segment.kind is SegmentKind.PLACEHOLDER:
            if arg_index >= supplied:
                raise MissingArgument(arg_index, supplied)
            args[arg_index].render_into(buffer)
            arg_index += 1
            continue
        buffer.append(text[segment.start : segment.end])
    return arg_index


class Formatter:
    """Validate-once, render-many formatter bound to one `FormatConfig`."""

    def __init__(self, config: FormatConfig | None = None) -> None:
        self.config = config or FormatConfig()
        self._compile = make_template_cache(self.config.cache_size)

    def template(self, template: Template | str) -> Template:
        if isinstance(template, Template):
            return template
        return self._compile(template)

    def capture(self, args: Sequence[object]) -> ArgumentList:
        return ArgumentList.capture(
            args,
            capacity=self.config.max_args,
            float_format=self.config.float_format,
        )

    def vformat(self, template: Template | str, args: Sequence[object]) -> str:
        compiled = self.template(template)
        captured = self.capture(args)
        buffer = OutputBuffer()
        buffer.reserve(len(compiled) + captured.estimate_total_size())
        substitute(compiled.text, captured, buffer)
        return buffer.take()

    def format(self, template: Template | str, *args: object) -> str:
        return self.vformat(template, args)


_DEFAULT_FORMATTER = Formatter()


def default_formatter() -> Formatter:
    return _DEFAULT_FORMATTER


def vformat(template: Template | str, args: Sequence[object]) -> str:
    return _DEFAULT_FORMATTER.vformat(template, args)


def format(template: Template | str, *args: object) -> str:  # noqa: A001
    """Substitute *args* into *template*'s `{}` placeholders.

    >>> format("{} + {} = {}", 2, 3, 5)
    '2 + 3 = 5'
    >>> format("{{{}}}", 5)
    '{5}'
    """

    return _DEFAULT_FORMATTER.vformat(template, args)
