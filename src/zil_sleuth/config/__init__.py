"""Configuration management for zil_sleuth package."""

from .settings import Settings, settings, RPCSettings, ColumnSchemas, APIUrls

__all__ = [
    "Settings",
    "settings",
    "RPCSettings",
    "ColumnSchemas",
    "APIUrls",
]
