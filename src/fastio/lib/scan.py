"""Single-pass template scanner shared by the driver and template inspection."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, NamedTuple

from fastio.lib.errors import UnmatchedClosingBrace, UnterminatedPlaceholder

if TYPE_CHECKING:
    from collections.abc import Iterator


class SegmentKind(StrEnum):
    LITERAL = "literal"
    BRACE = "brace"
    PLACEHOLDER = "placeholder"


class Segment(NamedTuple):
    """One scanned piece of a template.

    LITERAL and BRACE segments cover `text[start:end]` verbatim (a BRACE is
    the first character of an escaped pair). PLACEHOLDER segments point at
    the opening brace.
    """

    kind: SegmentKind
    start: int
    end: int


def iter_segments(text: str) -> Iterator[Segment]:
    """Yield literal spans, escaped braces and placeholders left to right.

    A placeholder is yielded as soon as its `{` is seen; the closing `}` is
    searched for when the consumer resumes, so argument checks happen before
    termination checks.
    """

    pos = 0
    end = len(text)
    literal_start = 0

    while pos < end:
        char = text[pos]
        if char == "{":
            if literal_start < pos:
                yield Segment(SegmentKind.LITERAL, literal_start, pos)
            if pos + 1 < end and text[pos + 1] == "{":
                yield Segment(SegmentKind.BRACE, pos, pos + 1)
                pos += 2
                literal_start = pos
                continue

            yield Segment(SegmentKind.PLACEHOLDER, pos, pos + 1)
            # Field contents are ignored; only the closing brace matters.
            close = text.find("}", pos + 1)
            if close == -1:
                raise UnterminatedPlaceholder(pos)
            pos = close + 1
            literal_start = pos
        elif char == "}":
            if pos + 1 < end and text[pos + 1] == "}":
                if literal_start < pos:
                    yield Segment(SegmentKind.LITERAL, literal_start, pos)
                yield Segment(SegmentKind.BRACE, pos, pos + 1)
                pos += 2
                literal_start = pos
                continue
            raise UnmatchedClosingBrace(pos)
        else:
            pos += 1

    if literal_start < end:
        yield Segment(SegmentKind.LITERAL, literal_start, end)
