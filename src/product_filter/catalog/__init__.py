"""Catalog – products and the filters that select them."""

from product_filter.catalog.filter import BetterFilter, Filter
from product_filter.catalog.legacy import ProductFilter
from product_filter.catalog.product import Color, Product, Size
from product_filter.catalog.specifications import ColorSpecification, SizeSpecification

__all__ = [
    "BetterFilter",
    "Color",
    "ColorSpecification",
    "Filter",
    "Product",
    "ProductFilter",
    "Size",
    "SizeSpecification",
]
