"""Minimal logging utilities for Tablero.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from tablero.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Formatting table at row %d", 4)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tablero." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("editor")
        >>> logger.name
        'tablero.editor'
    """
    if not (name == "tablero" or name.startswith("tablero.")):
        name = f"tablero.{name}"
    return logging.getLogger(name)
