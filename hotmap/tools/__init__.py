"""Configuration tools and utilities."""

from .config_loader import (
    ConfigLoader,
    HotmapSettings,
    get_config,
    load_hotmap_settings,
)

__all__ = [
    "ConfigLoader",
    "HotmapSettings",
    "get_config",
    "load_hotmap_settings",
]
