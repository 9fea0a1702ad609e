"""ProductFilter — one method per criterion.

Every new criterion (or combination of criteria) needs another method here,
which is exactly what :class:`~product_filter.catalog.filter.BetterFilter`
avoids.  Kept for comparison only; do not extend.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from product_filter.catalog.product import Color, Product, Size


class ProductFilter:
    def filter_by_size(self, products: Iterable[Product], size: Size) -> Iterator[Product]:
        for p in products:
            if p.size == size:
                yield p

    def filter_by_color(self, products: Iterable[Product], color: Color) -> Iterator[Product]:
        for p in products:
            if p.color == color:
                yield p

    def filter_by_size_and_color(
        self, products: Iterable[Product], size: Size, color: Color
    ) -> Iterator[Product]:
        for p in products:
            if p.size == size and p.color == color:
                yield p


__all__ = ["ProductFilter"]
