"""Config settings – Settings base class and the demo settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from product_filter.config.validation.errors import InvalidSettingValueError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class DemoSettings(Settings):
    """Settings read by the ``product-filter`` console script."""

    _prefix: ClassVar[str] = "PRODUCT_FILTER"

    log_level: str = "WARNING"
    json_logs: bool = False

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )


__all__ = ["DemoSettings", "Settings"]
