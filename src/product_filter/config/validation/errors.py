"""Errors raised while loading or validating settings."""
from __future__ import annotations

from product_filter.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without default has no environment variable."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} is not set and has no default",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value is rejected."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": value},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
