"""
Logging utilities for the command line front end.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
CLI attaches a single stderr handler here.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO


def attach_console_handler(
    stream: Optional[TextIO] = None,
    *,
    verbose: bool = False,
    logger_name: Optional[str] = None,
) -> logging.Handler:
    """
    Attach a plain-message stream handler to a logger (root if None).

    Args:
        stream: Output stream. Defaults to stderr.
        verbose: Log DEBUG messages too; otherwise INFO and above.
        logger_name: Name of logger to attach to. None = root logger.

    Returns:
        The attached handler (for later removal).
    """
    level = logging.DEBUG if verbose else logging.INFO
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(logger_name)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def detach_handler(handler: logging.Handler, logger_name: Optional[str] = None) -> None:
    """
    Remove a handler from the specified logger.

    Args:
        handler: The handler to remove.
        logger_name: Name of logger to detach from. None = root logger.
    """
    logging.getLogger(logger_name).removeHandler(handler)
