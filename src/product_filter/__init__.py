"""
product_filter – composable product filtering with specifications.

Import path convention::

    from product_filter.catalog import BetterFilter, ColorSpecification, Product
    from product_filter.kernel.ddd import AndSpecification, BaseSpecification
    from product_filter.kernel.errors import InvalidArgumentError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
