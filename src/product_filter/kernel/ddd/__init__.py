"""Domain building blocks — public re-export surface."""

from product_filter.kernel.ddd.invariant import Invariant
from product_filter.kernel.ddd.specification import (
    AndSpecification,
    BaseSpecification,
    LambdaSpecification,
    NotSpecification,
    OrSpecification,
)
from product_filter.kernel.ddd.value_object import ValueObject

__all__ = [
    "AndSpecification",
    "BaseSpecification",
    "Invariant",
    "LambdaSpecification",
    "NotSpecification",
    "OrSpecification",
    "ValueObject",
]
