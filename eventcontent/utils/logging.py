"""
Centralized logging setup for the content pipeline.

Modules log through ``logging.getLogger(__name__)``; the CLI calls
``setup_logging`` once to attach a single stream handler to the package logger.
"""

import logging
import sys

PACKAGE_LOGGER = "eventcontent"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not any(getattr(h, "_eventcontent", False) for h in logger.handlers):
        # stderr keeps stdout free for dataset JSON
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._eventcontent = True
        logger.addHandler(handler)
    return logger
