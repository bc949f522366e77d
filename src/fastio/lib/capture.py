"""Argument capture for one formatting call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fastio.lib.errors import TooManyArguments
from fastio.lib.render import RenderRule, rule_for

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from fastio.lib.buffer import OutputBuffer

MAX_ARGS = 16


@dataclass(frozen=True, slots=True)
class ArgumentHandle:
    """Reference to one call argument plus the rule chosen for its type."""

    value: Any
    rule: RenderRule

    def render_into(self, buffer: OutputBuffer) -> None:
        buffer.append(self.rule.render(self.value))

    def estimated_size(self) -> int:
        return self.rule.estimate(self.value)


class ArgumentList:
    """Ordered, bounded sequence of argument handles.

    Handles keep references to the caller's values; nothing is copied.
    """

    __slots__ = ("_capacity", "_handles")

    def __init__(self, handles: Sequence[ArgumentHandle], *, capacity: int = MAX_ARGS) -> None:
        if capacity < 1:
            raise ValueError(f"Argument capacity must be >= 1, got {capacity}")
        if len(handles) > capacity:
            raise TooManyArguments(len(handles), capacity)
        self._handles = tuple(handles)
        self._capacity = capacity

    @classmethod
    def capture(
        cls,
        args: Sequence[object],
        *,
        capacity: int = MAX_ARGS,
        float_format: str = "",
    ) -> ArgumentList:
        """Build one handle per argument, in call order."""

        if len(args) > capacity:
            raise TooManyArguments(len(args), capacity)
        handles = [
            ArgumentHandle(value, rule_for(value, float_format=float_format)) for value in args
        ]
        return cls(handles, capacity=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def estimate_total_size(self) -> int:
        return sum(handle.estimated_size() for handle in self._handles)

    def __len__(self) -> int:
        return len(self._handles)

    def __getitem__(self, index: int) -> ArgumentHandle:
        return self._handles[index]

    def __iter__(self) -> Iterator[ArgumentHandle]:
        return iter(self._handles)
