"""Shared utilities."""

from .logging import bind_context, get_logger, sanitize_for_logging

__all__ = [
    "bind_context",
    "get_logger",
    "sanitize_for_logging",
]
