"""
Logging setup shared by the quiz entrypoints.
"""

from __future__ import annotations

import logging
from typing import Optional

try:
    from ..config import config
except ImportError:
    from src.config import config


def setup_logger(name: str = "src", level: Optional[int] = None) -> logging.Logger:
    """
    Configure a logger with a single stream handler.

    Calling this more than once for the same name does not add handlers.

    Args:
        name: Logger name (default: the package root, so module loggers inherit it)
        level: Logging level (default: from config.logging)

    Returns:
        The configured logger
    """
    if level is None:
        level = config.logging.level()

    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(config.logging.log_format))
        logger.addHandler(handler)
    return logger
