"""Open/closed filtering driven by specifications."""

from __future__ import annotations

import abc
from typing import Generic, Iterable, Iterator, TypeVar

from product_filter.catalog.product import Product
from product_filter.kernel.ddd.specification import BaseSpecification
from product_filter.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class Filter(abc.ABC, Generic[T]):
    """Port: select the items satisfying a specification."""

    @abc.abstractmethod
    def filter(self, items: Iterable[T], spec: BaseSpecification[T]) -> Iterator[T]: ...


class BetterFilter(Filter[Product]):
    """Filters products with any specification, composite or not.

    The result is a generator: nothing is evaluated until the caller pulls
    the first item, input order is preserved and it can be consumed once.

    Example::

        large_blue = ColorSpecification(Color.BLUE) & SizeSpecification(Size.LARGE)
        for product in BetterFilter().filter(products, large_blue):
            ...
    """

    def filter(self, items: Iterable[Product], spec: BaseSpecification[Product]) -> Iterator[Product]:
        log = logger.bind(filter=type(self).__name__, spec=repr(spec))
        log.debug("filter.start")
        matched = 0
        for item in items:
            if spec.is_satisfied_by(item):
                matched += 1
                yield item
        log.debug("filter.done", matched=matched)


__all__ = ["BetterFilter", "Filter"]
