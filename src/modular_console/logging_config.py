"""Logging configuration for modular-console.

All modules log through ``logging.getLogger(__name__)`` under the
``modular_console`` namespace. The console script calls
``configure_logging`` once at startup.
"""
from __future__ import annotations

import logging
import sys
from typing import IO, Optional

LOGGER_NAME = "modular_console"

_handler: Optional[logging.Handler] = None


def configure_logging(
    level: int | str = logging.WARNING,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """Attach a stream handler to the modular_console logger.

    Calling this again replaces the previously installed handler.

    Args:
        level: Logging level (int or name such as "DEBUG")
        stream: Output stream (default: stderr)

    Returns:
        The installed handler
    """
    global _handler

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    reset_logging()

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setLevel(level)
    _handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    logger.addHandler(_handler)
    logger.setLevel(level)
    return _handler


def reset_logging() -> None:
    """Remove the handler installed by configure_logging, if any."""
    global _handler

    if _handler is not None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.removeHandler(_handler)
        logger.setLevel(logging.NOTSET)
        _handler.close()
        _handler = None
