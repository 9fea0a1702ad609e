"""Config settings – 12-factor env-based configuration."""
from product_filter.config.settings.base import DemoSettings, Settings
from product_filter.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["DemoSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
