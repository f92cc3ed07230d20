"""Logging configuration for the planner server."""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Send root logger output to stdout at the given level."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # avoid duplicate handlers when the app is reloaded
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
