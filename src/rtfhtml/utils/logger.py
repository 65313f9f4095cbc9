"""Logging helpers for rtfhtml.

Every logger lives under the "rtfhtml" namespace so applications can tune
the whole converter with one logger name. The package only attaches a
NullHandler; handlers and levels are left to the application.

Example:
    >>> from rtfhtml.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("List started (%s)", "ol")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "rtfhtml"

# Maximum characters of chunk text quoted in a log record
PREVIEW_LIMIT = 40

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the rtfhtml namespace.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'rtfhtml.mymodule'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + ".")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def preview(text: str, limit: int = PREVIEW_LIMIT) -> str:
    """Quote chunk text for a log message, truncated to limit characters.

    Example:
        >>> preview("never closed", limit=5)
        "'never'..."
    """
    if len(text) <= limit:
        return repr(text)
    return repr(text[:limit]) + "..."
