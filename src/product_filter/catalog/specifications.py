"""Attribute specifications over :class:`Product`."""

from __future__ import annotations

from product_filter.catalog.product import Color, Product, Size
from product_filter.kernel.ddd.specification import BaseSpecification


class ColorSpecification(BaseSpecification[Product]):
    """Satisfied by products of exactly one color."""

    def __init__(self, color: Color) -> None:
        self._color = color

    @property
    def color(self) -> Color:
        return self._color

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.color == self._color

    def __repr__(self) -> str:
        return f"ColorSpecification({self._color.name})"


class SizeSpecification(BaseSpecification[Product]):
    """Satisfied by products of exactly one size."""

    def __init__(self, size: Size) -> None:
        self._size = size

    @property
    def size(self) -> Size:
        return self._size

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.size == self._size

    def __repr__(self) -> str:
        return f"SizeSpecification({self._size.name})"


__all__ = ["ColorSpecification", "SizeSpecification"]
