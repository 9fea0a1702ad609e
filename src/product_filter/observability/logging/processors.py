"""Observability – get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound to the stdlib logger *name*.

    Events always go through :mod:`logging`, so a process that never called
    :func:`configure_logging` gets stdlib behaviour (WARNING and above, on
    stderr) rather than structlog's print-to-stdout default.  Processors are
    resolved lazily, so configuring later still applies.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )


__all__ = ["get_logger"]
