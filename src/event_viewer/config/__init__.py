"""Configuration helpers for the Device Event Viewer."""

from .settings import (
    DEFAULT_BACKEND_URL,
    DEFAULT_REQUEST_TIMEOUT,
    Settings,
    SettingsManager,
    cache_dir,
    config_dir,
    log_dir,
)

__all__ = [
    "DEFAULT_BACKEND_URL",
    "DEFAULT_REQUEST_TIMEOUT",
    "Settings",
    "SettingsManager",
    "cache_dir",
    "config_dir",
    "log_dir",
]
