"""Growable text accumulator used by the substitution driver."""

from __future__ import annotations


class OutputBuffer:
    """Accumulate text chunks and join them once on `take()`.

    `capacity` records the reservation hint; Python strings cannot be
    pre-allocated, so chunks are collected and joined in a single pass.
    """

    __slots__ = ("_capacity", "_chunks", "_length")

    def __init__(self, capacity: int = 0) -> None:
        self._chunks: list[str] = []
        self._length = 0
        self._capacity = 0
        if capacity:
            self.reserve(capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def reserve(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"reserve size must be >= 0, got {size}")
        if size > self._capacity:
            self._capacity = size

    def append(self, text: str) -> None:
        if not text:
            return
        self._chunks.append(text)
        self._length += len(text)
        if self._length > self._capacity:
            self._capacity = self._length

    def append_char(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"append_char expects exactly one character, got {char!r}")
        self.append(char)

    def take(self) -> str:
        """Return the accumulated text and leave the buffer empty."""

        text = "".join(self._chunks)
        self.clear()
        return text

    def clear(self) -> None:
        self._chunks.clear()
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return "".join(self._chunks)
