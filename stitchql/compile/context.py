"""Compilation context value object.

Packages the ``(compiler, profile)`` pair that the driver and every
formatter need into a single object.
"""
from __future__ import annotations

from dataclasses import dataclass

from stitchql.compile.base import TemplateCompiler
from stitchql.schema.profile import TemplateProfile


@dataclass(frozen=True)
class CompilationContext:
    """Immutable context for template compilation.

    Attributes:
        compiler: Dialect-specific compiler instance.
        profile: Engine policy (skip marker, strictness, empty arrays).
    """

    compiler: TemplateCompiler
    profile: TemplateProfile
