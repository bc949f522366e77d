"""Formatting error hierarchy.

Every error aborts the current formatting call; none are retried because a
malformed template or call site is a programming defect.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class FormatErrorKind(StrEnum):
    UNBALANCED_BRACES = "unbalanced_braces"
    MISSING_ARGUMENT = "missing_argument"
    UNTERMINATED_PLACEHOLDER = "unterminated_placeholder"
    UNMATCHED_CLOSING_BRACE = "unmatched_closing_brace"
    TOO_MANY_ARGUMENTS = "too_many_arguments"


class FormatError(ValueError):
    """Base class for template and argument errors."""

    kind: ClassVar[FormatErrorKind]


class UnbalancedBraces(FormatError):
    """Raised when a template fails brace validation at construction."""

    kind = FormatErrorKind.UNBALANCED_BRACES

    def __init__(self, template: str, position: int, reason: str) -> None:
        self.template = template
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} at position {position} in format string {template!r}")


class MissingArgument(FormatError):
    """Raised when a template has more placeholders than supplied arguments."""

    kind = FormatErrorKind.MISSING_ARGUMENT

    def __init__(self, index: int, supplied: int) -> None:
        self.index = index
        self.supplied = supplied
        super().__init__(
            f"Not enough arguments for format string: placeholder #{index + 1} "
            f"but only {supplied} supplied"
        )


class UnterminatedPlaceholder(FormatError):
    """Raised when a `{` is never closed before the template ends."""

    kind = FormatErrorKind.UNTERMINATED_PLACEHOLDER

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Unclosed placeholder opened at position {position}")


class UnmatchedClosingBrace(FormatError):
    """Raised for a bare `}` outside a placeholder that is not doubled."""

    kind = FormatErrorKind.UNMATCHED_CLOSING_BRACE

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Unmatched '}}' at position {position}")


class TooManyArguments(FormatError):
    """Raised when the argument count exceeds the capture capacity."""

    kind = FormatErrorKind.TOO_MANY_ARGUMENTS

    def __init__(self, count: int, capacity: int) -> None:
        self.count = count
        self.capacity = capacity
        super().__init__(f"Too many format arguments: got {count}, capacity is {capacity}")
