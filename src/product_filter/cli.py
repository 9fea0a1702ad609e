"""Console demonstration: the legacy filter next to the specification filter."""

from __future__ import annotations

import sys
from typing import TextIO

from product_filter.catalog import (
    BetterFilter,
    Color,
    ColorSpecification,
    Product,
    ProductFilter,
    Size,
    SizeSpecification,
)
from product_filter.config import ConfigError, DemoSettings, EnvSettingsLoader
from product_filter.kernel.ddd import AndSpecification
from product_filter.observability.logging import configure_logging, get_logger

logger = get_logger(__name__)


def sample_products() -> list[Product]:
    return [
        Product("Apple", Color.GREEN, Size.SMALL),
        Product("Tree", Color.GREEN, Size.LARGE),
        Product("House", Color.BLUE, Size.LARGE),
    ]


def run_demo(out: TextIO | None = None) -> None:
    """Write the fixed demonstration sequence to *out* (stdout by default)."""
    out = out or sys.stdout
    products = sample_products()
    logger.info("demo.start", products=len(products))

    pf = ProductFilter()
    print("Green products (old):", file=out)
    for p in pf.filter_by_color(products, Color.GREEN):
        print(f" - {p.name} is green", file=out)

    bf = BetterFilter()
    print("Green products (new):", file=out)
    for p in bf.filter(products, ColorSpecification(Color.GREEN)):
        print(f" - {p.name} is green", file=out)

    print("Large products (new):", file=out)
    for p in bf.filter(products, SizeSpecification(Size.LARGE)):
        print(f" - {p.name} is large", file=out)

    print("Large and blue products (new):", file=out)
    large_blue = AndSpecification([ColorSpecification(Color.BLUE), SizeSpecification(Size.LARGE)])
    for p in bf.filter(products, large_blue):
        print(f" - {p.name} is large and blue", file=out)

    logger.info("demo.done")


def main() -> int:
    """Entry point of the ``product-filter`` console script."""
    try:
        settings = EnvSettingsLoader().load(DemoSettings)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    configure_logging(level=settings.log_level, json=settings.json_logs)
    run_demo()
    return 0


__all__ = ["main", "run_demo", "sample_products"]
