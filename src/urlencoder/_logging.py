"""Logging setup for urlencoder.

The package logger stays silent until configure_logging() is called (the CLI
does this) or the application configures logging itself.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

LOG_LEVEL_ENV = "URLENCODER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s - %(message)s"

logger = logging.getLogger("urlencoder")
logger.addHandler(logging.NullHandler())


class StderrHandler(logging.StreamHandler):
    """StreamHandler that writes to whatever ``sys.stderr`` is at emit time."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stderr


_handler: StderrHandler | None = None


def configure_logging(level: str | None = None) -> logging.Handler:
    """Attach a stderr handler to the package logger.

    Calling it again only updates the level.

    Args:
        level: Level name; defaults to ``$URLENCODER_LOG_LEVEL`` or WARNING

    Returns:
        The handler attached to the package logger
    """
    global _handler

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")

    if _handler is None:
        _handler = StderrHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)

    logger.setLevel(level.upper())
    return _handler
