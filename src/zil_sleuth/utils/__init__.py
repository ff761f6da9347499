"""Utility modules for zil_sleuth package."""

from .logging import setup_logging

__all__ = [
    "setup_logging",
]
