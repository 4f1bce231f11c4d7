"""Logging configuration for the command-line entry point.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
and levels are decided here, once, by the process that runs them.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the root logger to write to stderr.

    Args:
        level: Level name such as ``"INFO"`` or ``"debug"``.

    Returns:
        The configured root logger.

    Raises:
        ValueError: If *level* is not a known level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    return root_logger
