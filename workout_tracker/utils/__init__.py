"""Utility modules for configuration."""

from .config import (
    TrackerConfig,
    MapSettings,
    StorageSettings,
    UISettings,
    get_config,
    reset_config
)

__all__ = [
    "TrackerConfig",
    "MapSettings",
    "StorageSettings",
    "UISettings",
    "get_config",
    "reset_config"
]
