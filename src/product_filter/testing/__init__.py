"""Testing support – fakes and Hypothesis strategies.

The strategies need the ``hypothesis`` package (``pip install "product-filter[test]"``).
"""

from product_filter.testing.fakes import RecordingSpecification
from product_filter.testing.strategies import (
    color_spec_strategy,
    product_strategy,
    products_strategy,
    size_spec_strategy,
    specification_strategy,
)

__all__ = [
    "RecordingSpecification",
    "color_spec_strategy",
    "product_strategy",
    "products_strategy",
    "size_spec_strategy",
    "specification_strategy",
]
