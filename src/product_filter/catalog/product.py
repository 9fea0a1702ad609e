"""Product entity and its enumerated attributes."""

from __future__ import annotations

import dataclasses
from enum import Enum

from product_filter.kernel.ddd.invariant import Invariant
from product_filter.kernel.ddd.value_object import ValueObject


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"


@dataclasses.dataclass(frozen=True)
class Product(ValueObject):
    """An immutable catalog item.

    Raises:
        InvalidArgumentError: when ``name`` is ``None`` or empty.
    """

    name: str
    color: Color
    size: Size

    def _validate(self) -> None:
        Invariant.not_blank(self.name, "name")


__all__ = ["Color", "Product", "Size"]
