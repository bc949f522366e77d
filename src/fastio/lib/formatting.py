"""Shared text-output protocol for operation result dataclasses.

Lives in the lib layer so operation outputs (lib/) and CLI code (cli/) can
both depend on it without lib -> cli imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Knobs passed to `format_text()` implementations."""

    verbosity: int = 0  # 0=normal, 1=verbose, -1=quiet


@runtime_checkable
class TextFormattable(Protocol):
    """Protocol for output dataclasses that provide a human-readable text form."""

    def format_text(self, ctx: FormatContext | None = None) -> str: ...
