"""
Logging utilities for dynamic-colors.

All loggers live under the ``dynamic_colors`` namespace and write to
stderr, so diagnostics never mix with the escape sequences on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_root_logger = logging.getLogger("dynamic_colors")

DEFAULT_FORMAT = "%(name)s [%(levelname)s] %(message)s"


def setup_logging(
    level: str | int = "WARNING",
    format: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Configure logging for the package.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...) or int
        format: Custom log format string
        stream: Output stream (defaults to stderr)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format or DEFAULT_FORMAT))
    handler.setLevel(level)
    _root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a submodule.

    Example:
        logger = get_logger("store")
        logger.debug("Loading %s", path)
    """
    if name.startswith("dynamic_colors."):
        return logging.getLogger(name)
    return logging.getLogger(f"dynamic_colors.{name}")
