"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


class JsonLoggerFactory:
    """Configure structlog to render through the stdlib root handler."""

    @staticmethod
    def configure(level: int | str = logging.WARNING, json: bool = False) -> None:
        """Install a single stderr handler on the root logger.

        Parameters
        ----------
        level:
            Numeric level or level name (``"DEBUG"``, ``"INFO"`` …).
        json:
            Render events as JSON lines instead of the console renderer.
        """
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(level: int | str = logging.WARNING, json: bool = False) -> None:
    """Shorthand for :meth:`JsonLoggerFactory.configure`."""
    JsonLoggerFactory.configure(level=level, json=json)


__all__ = ["JsonLoggerFactory", "configure_logging"]
