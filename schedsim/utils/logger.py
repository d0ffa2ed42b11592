"""Logging setup shared by all simulator components."""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: Union[str, int] = "INFO") -> logging.Logger:
    """Create or fetch a configured logger.

    Calling this repeatedly with the same name returns the same logger
    without stacking handlers.

    Args:
        name: Logger name (usually the class name)
        level: Logging level name or number

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
