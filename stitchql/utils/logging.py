"""Logging helpers for stitchQL.

The library only creates loggers under the ``stitchql`` namespace and never
installs handlers on import; applications opt in with
:func:`configure_logging` or their own logging setup.
"""

from __future__ import annotations

import logging
import sys

__all__ = ("configure_logging", "get_logger")

_ROOT = "stitchql"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``stitchql`` namespace.

    Args:
        name: Logger name. If not provided, returns the root stitchql logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(_ROOT)
    if not name.startswith(_ROOT):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "INFO", handler: logging.Handler | None = None) -> None:
    """Attach a single handler to the root stitchql logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        handler: Handler to install; defaults to a stderr stream handler.
    """
    root_logger = logging.getLogger(_ROOT)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(handler)
    root_logger.propagate = False
