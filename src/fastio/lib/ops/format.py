"""Template rendering and validation operations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from fastio.lib.driver import Formatter
from fastio.lib.errors import FormatError
from fastio.lib.ops._runtime import build_runtime
from fastio.lib.ops.registry import OperationSpec, operation
from fastio.lib.reading import parse_int
from fastio.lib.render import render_value
from fastio.lib.template import Template

if TYPE_CHECKING:
    from fastio.lib.formatting import FormatContext

logger = structlog.get_logger(__name__)

_FLOAT_RX = re.compile(r"-?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][-+]?[0-9]+)?")


@dataclass(frozen=True, slots=True)
class FormatRenderInput:
    template: str
    args: tuple[str, ...] = ()
    coerce: bool = True
    root: str | None = None


@dataclass(frozen=True, slots=True)
class FormatRenderOutput:
    text: str
    placeholders: int
    args_used: int

    def format_text(self, ctx: FormatContext | None = None) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class FormatCheckInput:
    template: str


@dataclass(frozen=True, slots=True)
class FormatCheckOutput:
    ok: bool
    placeholders: int
    error: str | None = None
    kind: str | None = None

    def format_text(self, ctx: FormatContext | None = None) -> str:
        """Key-value validation result for text output mode."""
        from fastio.cli.format_helpers import kv_block

        return kv_block(
            [
                ("ok", "yes" if self.ok else "no"),
                ("placeholders", str(self.placeholders)),
                ("kind", self.kind),
                ("error", self.error),
            ]
        )


def coerce_arg(token: str) -> object:
    """Turn a command-line token into a bool, int or float when it spells one.

    A token is only converted when the value renders back to the same text,
    so `007`, `1.50`, `-0`, `True` and `1e400` stay strings.
    """

    if token in {"true", "false"}:
        return token == "true"
    value: object
    try:
        value = parse_int(token)
    except ValueError:
        if not _FLOAT_RX.fullmatch(token):
            return token
        value = float(token)
    return value if render_value(value) == token else token


def format_render_sync(payload: FormatRenderInput) -> FormatRenderOutput:
    runtime = build_runtime(payload.root)
    formatter = Formatter(runtime.config.format)
    template = formatter.template(payload.template)
    args = [coerce_arg(arg) for arg in payload.args] if payload.coerce else list(payload.args)
    text = formatter.vformat(template, args)
    placeholders = template.placeholder_count
    logger.debug(
        "Rendered template",
        placeholders=placeholders,
        supplied=len(args),
        coerced=payload.coerce,
    )
    return FormatRenderOutput(
        text=text,
        placeholders=placeholders,
        args_used=min(placeholders, len(args)),
    )


def format_check_sync(payload: FormatCheckInput) -> FormatCheckOutput:
    try:
        placeholders = Template(payload.template).placeholder_count
    except FormatError as exc:
        return FormatCheckOutput(ok=False, placeholders=0, error=str(exc), kind=str(exc.kind))
    return FormatCheckOutput(ok=True, placeholders=placeholders)


operation(
    OperationSpec[FormatRenderInput, FormatRenderOutput](
        name="format.render",
        handler=format_render_sync,
        input_type=FormatRenderInput,
        output_type=FormatRenderOutput,
        cli_group="format",
        cli_name="render",
        description="Substitute arguments into a template's {} placeholders.",
    )
)

operation(
    OperationSpec[FormatCheckInput, FormatCheckOutput](
        name="format.check",
        handler=format_check_sync,
        input_type=FormatCheckInput,
        output_type=FormatCheckOutput,
        cli_group="format",
        cli_name="check",
        description="Validate a template's braces and count its placeholders.",
    )
)
