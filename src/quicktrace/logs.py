"""Logging helpers for the quicktrace package.

All package loggers are children of the ``quicktrace`` logger, so one
call to configure_logging() controls the whole tree.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "quicktrace"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a logger under the ``quicktrace`` namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    Safe to call repeatedly: the handler is only installed once.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(level)
    logger.propagate = False
    return logger
