"""Configuration – env-based settings and their errors."""
from product_filter.config.settings import DemoSettings, EnvSettingsLoader, Settings, SettingsLoader
from product_filter.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DemoSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
