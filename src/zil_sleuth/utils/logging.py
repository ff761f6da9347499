"""Logging helpers."""

import logging

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT):
    """Set up logging configuration."""
    logging.basicConfig(level=level, format=fmt)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
