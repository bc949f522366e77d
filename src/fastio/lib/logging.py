"""Structlog configuration for the fastio command line."""

from __future__ import annotations

import logging as std_logging
import sys

import structlog

_VERBOSITY_LEVELS: tuple[int, ...] = (std_logging.WARNING, std_logging.INFO, std_logging.DEBUG)


def level_from_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return _VERBOSITY_LEVELS[0]
    return _VERBOSITY_LEVELS[min(verbosity, len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(json_mode: bool = False, verbosity: int = 0) -> None:
    """Route stdlib and structlog records to stderr at the requested level."""

    level = level_from_verbosity(verbosity)
    # Formatted text goes to stdout; keep every log line on stderr.
    handler = std_logging.StreamHandler(sys.stderr)
    handler.setFormatter(std_logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    std_logging.basicConfig(level=level, handlers=[handler], force=True)

    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
