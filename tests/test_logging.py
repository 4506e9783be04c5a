"""Unit tests for stitchql.utils.logging."""
from __future__ import annotations

import io
import logging

import stitchql
from stitchql.utils.logging import configure_logging, get_logger


def test_get_logger_namespaces_names():
    assert get_logger().name == "stitchql"
    assert get_logger("custom").name == "stitchql.custom"
    assert get_logger("stitchql.compile").name == "stitchql.compile"


def test_configure_logging_routes_driver_messages():
    stream = io.StringIO()
    root = logging.getLogger("stitchql")
    saved = (root.level, list(root.handlers), root.propagate)
    try:
        configure_logging("DEBUG", handler=logging.StreamHandler(stream))
        stitchql.build_query("a = ?d{ AND b = ?d}", [1, stitchql.SKIP])
    finally:
        root.setLevel(saved[0])
        root.handlers[:] = saved[1]
        root.propagate = saved[2]
    output = stream.getvalue()
    assert "2 placeholder(s)" in output
    assert "Dropped 1 conditional fragment(s)" in output
