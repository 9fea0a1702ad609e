"""Kernel – framework-agnostic building blocks."""

from product_filter.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidArgumentError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
]
