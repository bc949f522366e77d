"""Elapsed-time stopwatch."""

from __future__ import annotations

import time
from typing import Literal, Self

TimeUnit = Literal["ns", "us", "ms", "s"]

_NS_PER_UNIT: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
}


class Stopwatch:
    """Monotonic stopwatch that starts on construction.

    Used as a context manager it restarts on entry and freezes on exit, so
    `elapsed()` afterwards reports the duration of the block.
    """

    __slots__ = ("_start_ns", "_stop_ns")

    def __init__(self) -> None:
        self._start_ns = time.perf_counter_ns()
        self._stop_ns: int | None = None

    def reset(self) -> None:
        self._start_ns = time.perf_counter_ns()
        self._stop_ns = None

    def elapsed_ns(self) -> int:
        end = time.perf_counter_ns() if self._stop_ns is None else self._stop_ns
        return end - self._start_ns

    def elapsed(self, unit: TimeUnit = "ms") -> int:
        """Elapsed time truncated to whole *unit*s."""

        divisor = _NS_PER_UNIT.get(unit)
        if divisor is None:
            raise ValueError(
                f"Unsupported time unit {unit!r}; expected one of {sorted(_NS_PER_UNIT)}"
            )
        return self.elapsed_ns() // divisor

    def __enter__(self) -> Self:
        self.reset()
        return self

    def __exit__(self, *_: object) -> None:
        self._stop_ns = time.perf_counter_ns()
