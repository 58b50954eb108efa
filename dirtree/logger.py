"""Diagnostics logging for the command-line tool."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "dirtree"

_handler: logging.Handler | None = None


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Route ``dirtree`` log records to the current ``sys.stderr``.

    Calling it again replaces the previously installed handler.
    """
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setLevel(level)
    _handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
    logger.addHandler(_handler)
    return logger
