"""Observability – structlog configuration and logger helpers."""
from product_filter.observability.logging.factory import JsonLoggerFactory, configure_logging
from product_filter.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
