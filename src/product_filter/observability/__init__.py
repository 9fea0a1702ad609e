"""Observability – structured logging."""
from product_filter.observability.logging import JsonLoggerFactory, configure_logging, get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
