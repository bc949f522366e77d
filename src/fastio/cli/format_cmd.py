"""CLI command handlers for format.* operations."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING, Annotated, Any

from cyclopts import Parameter

from fastio.lib.ops.format import (
    FormatCheckInput,
    FormatRenderInput,
    format_check_sync,
    format_render_sync,
)
from fastio.lib.ops.registry import get_all_operations

if TYPE_CHECKING:
    from cyclopts import App

Emitter = Callable[[Any], None]


def _format_render(
    emit: Emitter,
    template: str,
    args: Annotated[
        tuple[str, ...],
        Parameter(help="Values for the placeholders, in order.", negative_iterable=()),
    ] = (),
    *,
    raw: Annotated[
        bool,
        Parameter(
            name="--raw",
            help="Pass arguments as strings. Otherwise tokens that render back "
            "unchanged become bool, int or float.",
        ),
    ] = False,
    root: Annotated[
        str | None,
        Parameter(name="--root", help="Project root holding .fastio/config.toml."),
    ] = None,
) -> None:
    emit(
        format_render_sync(
            FormatRenderInput(template=template, args=args, coerce=not raw, root=root)
        )
    )


def _format_check(emit: Emitter, template: str) -> None:
    emit(format_check_sync(FormatCheckInput(template=template)))


def register_format_commands(app: App, emit: Emitter) -> tuple[set[str], dict[str, str]]:
    handlers: dict[str, Callable[[], Callable[..., None]]] = {
        "format.render": lambda: partial(_format_render, emit),
        "format.check": lambda: partial(_format_check, emit),
    }

    registered: set[str] = set()
    descriptions: dict[str, str] = {}

    for op in get_all_operations():
        if op.cli_group != "format":
            continue
        handler_factory = handlers.get(op.name)
        if handler_factory is None:
            raise ValueError(f"No CLI handler registered for operation '{op.name}'")
        handler = handler_factory()
        handler.__name__ = f"cmd_{op.cli_group}_{op.cli_name}"
        app.command(handler, name=op.cli_name, help=op.description)
        registered.add(f"{op.cli_group}.{op.cli_name}")
        descriptions[op.name] = op.description

    return registered, descriptions
