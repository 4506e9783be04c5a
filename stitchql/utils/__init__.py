"""Shared helpers for stitchQL."""
from stitchql.utils.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
