"""Logging setup for Raptor.

Modules log through logging.getLogger(__name__) with a bracketed component
prefix, e.g. "[VIEWS] Cached layout ...". setup_logging() installs a single
console handler on the "raptor" logger.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "raptor-console"


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Configure console logging for the raptor package.

    Safe to call more than once: the handler is only added the first time,
    later calls just update the level.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or number

    Returns:
        The configured "raptor" logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("raptor")
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
