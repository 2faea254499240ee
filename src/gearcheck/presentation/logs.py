"""Logging setup for the command line.

The library itself only creates module loggers; handlers are installed
here, once, by the CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def verbosity_level(verbose: int) -> int:
    """Map -v count to a logging level (0: WARNING, 1: INFO, 2+: DEBUG)."""
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    level: int | str = logging.WARNING,
    stream: TextIO | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure the gearcheck logger with a single stderr handler.

    Args:
        level: Logging level or its name (DEBUG, INFO, ...)
        stream: Handler stream (default: sys.stderr)
        format_string: Custom format string

    Returns:
        The gearcheck package logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    logger = logging.getLogger("gearcheck")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
