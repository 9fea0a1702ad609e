"""Argument checks used by domain constructors."""

from __future__ import annotations

from product_filter.kernel.errors.domain import InvalidArgumentError


class Invariant:
    """Namespace for argument assertions that raise :class:`InvalidArgumentError`."""

    @staticmethod
    def not_blank(value: str | None, name: str = "value") -> str:
        """Return *value* when it is a non-empty string."""
        if value is None:
            raise InvalidArgumentError(name, f"{name} must not be None")
        if not isinstance(value, str):
            raise InvalidArgumentError(name, f"{name} must be a string, got {type(value).__name__}")
        if not value:
            raise InvalidArgumentError(name, f"{name} must not be empty")
        return value


__all__ = ["Invariant"]
