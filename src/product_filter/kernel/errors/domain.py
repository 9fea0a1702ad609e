"""Domain errors — rejected input to domain objects."""

from __future__ import annotations

from typing import Any

from product_filter.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A domain rule rejected the operation."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input failed validation; ``errors`` lists per-field problems."""

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors) if errors else []

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


class InvalidArgumentError(ValidationError):
    """A constructor or function argument is absent or malformed."""

    default_code = "invalid_argument"

    def __init__(
        self,
        argument: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("detail", {"argument": argument})
        super().__init__(message or f"argument '{argument}' is invalid", **kwargs)
        self.argument = argument


__all__ = ["DomainError", "InvalidArgumentError", "ValidationError"]
