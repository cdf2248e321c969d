"""Utilities - logging."""

from raptor.utilities.logging import setup_logging

__all__ = [
    "setup_logging",
]
