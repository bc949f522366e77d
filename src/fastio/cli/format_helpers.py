"""Shared text formatting primitives for CLI output."""

from __future__ import annotations


def kv_block(pairs: list[tuple[str, str | None]]) -> str:
    """Render key: value pairs, skipping None values.

    >>> kv_block([("ok", "yes"), ("placeholders", "2"), ("error", None)])
    'ok: yes\\nplaceholders: 2'
    """
    return "\n".join(f"{k}: {v}" for k, v in pairs if v is not None)
