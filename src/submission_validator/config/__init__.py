"""Configuration management for submission-validator."""

from submission_validator.config.settings import (
    NetworkSettings,
    ServerSettings,
    Settings,
    SettingsManager,
    default_config_dir,
    load_settings,
)

__all__ = [
    "NetworkSettings",
    "ServerSettings",
    "Settings",
    "SettingsManager",
    "default_config_dir",
    "load_settings",
]
