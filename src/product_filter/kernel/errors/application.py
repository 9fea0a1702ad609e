"""Application-layer errors — failures outside the domain model."""

from __future__ import annotations

from product_filter.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern (configuration, wiring)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
