"""Data sources built on the Zilliqa client."""

from .zilliqa import ZilliqaSource

__all__ = [
    "ZilliqaSource",
]
