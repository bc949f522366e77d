"""fastio: positional `{}` template formatting with type-directed rendering."""

from fastio.lib.capture import MAX_ARGS, ArgumentHandle, ArgumentList
from fastio.lib.driver import Formatter, format, substitute, vformat
from fastio.lib.errors import (
    FormatError,
    FormatErrorKind,
    MissingArgument,
    TooManyArguments,
    UnbalancedBraces,
    UnmatchedClosingBrace,
    UnterminatedPlaceholder,
)
from fastio.lib.printing import (
    Printer,
    print,
    print_fmt,
    print_spaced,
    println,
    println_fmt,
    println_spaced,
)
from fastio.lib.reading import TokenReader, parse_int, read, readline
from fastio.lib.render import render_value
from fastio.lib.stopwatch import Stopwatch
from fastio.lib.template import Template, compile_template, validate

__version__ = "0.1.0"

__all__ = [
    "MAX_ARGS",
    "ArgumentHandle",
    "ArgumentList",
    "FormatError",
    "FormatErrorKind",
    "Formatter",
    "MissingArgument",
    "Printer",
    "Stopwatch",
    "Template",
    "TokenReader",
    "TooManyArguments",
    "UnbalancedBraces",
    "UnmatchedClosingBrace",
    "UnterminatedPlaceholder",
    "__version__",
    "compile_template",
    "format",
    "parse_int",
    "print",
    "print_fmt",
    "print_spaced",
    "println",
    "println_fmt",
    "println_spaced",
    "read",
    "readline",
    "render_value",
    "substitute",
    "validate",
    "vformat",
]
