"""Whitespace-token and line readers over text streams."""

from __future__ import annotations

import re
import sys
import weakref
from collections import deque
from typing import TYPE_CHECKING, Any, TextIO, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

_INT_RX = re.compile(r"-?[0-9]+")
_TRUE_TOKENS = frozenset({"true", "1"})
_FALSE_TOKENS = frozenset({"false", "0"})


def parse_int(text: str) -> int:
    """Parse a strict decimal integer (optional leading '-')."""

    if not _INT_RX.fullmatch(text):
        raise ValueError(f"Failed to parse integer: {text!r}")
    return int(text)


def parse_bool(text: str) -> bool:
    normalized = text.lower()
    if normalized in _TRUE_TOKENS:
        return True
    if normalized in _FALSE_TOKENS:
        return False
    raise ValueError(f"Failed to parse boolean: {text!r}")


_PARSERS: dict[type[Any], Callable[[str], Any]] = {
    int: parse_int,
    bool: parse_bool,
    float: float,
    str: str,
}


class TokenReader:
    """Read whitespace-delimited tokens that may span several lines."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()
        # Unconsumed remainder of the line the last tokens came from.
        self._rest = ""
        self._mid_line = False

    def _fill(self) -> bool:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return False
            self._pending.extend(line.split())
            self._rest = line
        self._mid_line = True
        return True

    def _advance_rest(self, token: str) -> None:
        index = self._rest.find(token)
        self._rest = self._rest[index + len(token) :] if index != -1 else ""

    def read(self, type_: type[T] = str) -> T:  # type: ignore[assignment]
        """Return the next token converted to *type_*."""

        parser = _PARSERS.get(type_)
        if parser is None:
            raise TypeError(f"Unsupported input type: {type_.__name__}")
        if not self._fill():
            raise EOFError("No more input tokens")
        token = self._pending.popleft()
        self._advance_rest(token)
        return cast("T", parser(token))

    def read_many(self, *types: type[Any]) -> tuple[Any, ...]:
        return tuple(self.read(type_) for type_ in types)

    def readline(self) -> str:
        """Return the rest of the current line, or the next line, without its terminator."""

        if self._mid_line:
            line = self._rest
            self._pending.clear()
            self._rest = ""
            self._mid_line = False
        else:
            line = self._stream.readline()
        return line.rstrip("\r\n")


# Readers live only as long as their stream; the cached reader reaches it
# through a proxy so the value never keeps its own key alive.
_READERS: weakref.WeakKeyDictionary[TextIO, TokenReader] = weakref.WeakKeyDictionary()


def _reader_for(stream: TextIO | None) -> TokenReader:
    target = sys.stdin if stream is None else stream
    reader = _READERS.get(target)
    if reader is None:
        reader = TokenReader(cast("TextIO", weakref.proxy(target)))
        _READERS[target] = reader
    return reader


def read(*types: type[Any], stream: TextIO | None = None) -> Any:
    """Read one value per type from *stream* (stdin by default).

    Returns a single value for one type, a tuple otherwise.
    """

    reader = _reader_for(stream)
    if len(types) <= 1:
        return reader.read(types[0] if types else str)
    return reader.read_many(*types)


def readline(stream: TextIO | None = None) -> str:
    return _reader_for(stream).readline()
