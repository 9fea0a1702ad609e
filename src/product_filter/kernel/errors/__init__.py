"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── InvalidArgumentError
    └── ApplicationError     (application.py)
"""

from product_filter.kernel.errors.application import ApplicationError
from product_filter.kernel.errors.base import BaseError
from product_filter.kernel.errors.domain import (
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
