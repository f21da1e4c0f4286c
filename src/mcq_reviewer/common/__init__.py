"""Shared helpers that sit outside the parsing core."""

from .logging_utils import attach_console_handler, detach_handler

__all__ = ["attach_console_handler", "detach_handler"]
