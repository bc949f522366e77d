"""Validated format templates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from fastio.lib.errors import UnbalancedBraces
from fastio.lib.scan import SegmentKind, iter_segments

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 256


def validate(text: str) -> None:
    """Check that every unescaped `{` is closed by a later unescaped `}`.

    Doubled braces are literals and skipped as a pair. A closing brace that
    drives the open count negative fails immediately; an open count left
    over at the end fails after the scan.
    """

    depth = 0
    last_open = -1
    i = 0
    size = len(text)
    while i < size:
        char = text[i]
        if char == "{":
            if i + 1 < size and text[i + 1] == "{":
                i += 2
                continue
            depth += 1
            last_open = i
        elif char == "}":
            if i + 1 < size and text[i + 1] == "}":
                i += 2
                continue
            depth -= 1
            if depth < 0:
                raise UnbalancedBraces(text, i, "Unmatched '}'")
        i += 1

    if depth > 0:
        raise UnbalancedBraces(text, last_open, "Unmatched '{'")


@dataclass(frozen=True, slots=True)
class Template:
    """A template whose braces were validated at construction."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Template text must be str, got {type(self.text).__name__}")
        validate(self.text)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    @property
    def placeholder_count(self) -> int:
        """Number of placeholders the driver will fill.

        Raises the driver's scanning errors for templates that pass brace
        validation but still cannot be substituted (e.g. ``"{a{b} }"``).
        """

        return sum(
            1 for segment in iter_segments(self.text) if segment.kind is SegmentKind.PLACEHOLDER
        )


def _compile(text: str) -> Template:
    logger.debug("Compiling format template %r", text)
    return Template(text)


def make_template_cache(maxsize: int = DEFAULT_CACHE_SIZE):
    """Return a cached `str -> Template` compiler with its own LRU cache."""

    if maxsize < 0:
        raise ValueError(f"Template cache size must be >= 0, got {maxsize}")
    return lru_cache(maxsize=maxsize)(_compile)


compile_template = make_template_cache()
