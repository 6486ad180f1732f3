"""Configuration loading utilities for fsfind."""

from .settings import (
    DEFAULT_CONFIG_PATH,
    SearchSettings,
    Settings,
    load_settings,
    resolve_settings,
    save_settings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "SearchSettings",
    "Settings",
    "load_settings",
    "resolve_settings",
    "save_settings",
]
