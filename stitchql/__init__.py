"""stitchQL – typed placeholder templates for hand-written SQL.

Write the SQL. Let the template quote it.

Public API
----------
``build_query``
    Substitute ``?``, ``?d``, ``?f``, ``?a`` and ``?#`` placeholders with
    arguments and resolve ``{...}`` conditional fragments.

``skip`` / ``SKIP``
    The sentinel that drops the fragment holding its placeholder.

``quote_identifier``, ``format_value``, ``resolve_conditionals``
    The individual pipeline stages, for callers that need only one.

Example::

    import stitchql

    sql = stitchql.build_query(
        "SELECT ?# FROM users WHERE name = ?{ AND block = ?d}",
        [["id", "name"], "O'Brien", stitchql.skip()],
    )
    # SELECT `id`, `name` FROM users WHERE name = 'O\\'Brien'

Extensibility
-------------
New dialects can be registered via::

    from stitchql.compile.registry import CompilerFactory

    @CompilerFactory.register("mssql")
    class MSSQLTemplateCompiler(TemplateCompiler):
        ...

After registration, ``build_query`` picks it up for any
``TemplateProfile`` with ``target="mssql"``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from stitchql.compile.base import TemplateCompiler
from stitchql.compile.builder import TemplateBuilder
from stitchql.compile.conditional import ConditionalResolver, resolve_conditionals
from stitchql.compile.escaping import (
    Escaper,
    escaper_from_connection,
    mysql_escape,
    standard_escape,
)
from stitchql.compile.lexer import tokenize
from stitchql.compile.mysql import MySQLTemplateCompiler
from stitchql.compile.postgres import PostgresTemplateCompiler
from stitchql.compile.registry import CompilerFactory
from stitchql.compile.sqlite import SQLiteTemplateCompiler
from stitchql.errors import (
    ArgumentCountError,
    CompilationError,
    FormatError,
    ProfileConfigError,
    stitchQLError,
)
from stitchql.schema.profile import TemplateProfile, TemplateProfileBuilder
from stitchql.schema.values import SKIP, Skip, skip
from stitchql.utils.logging import configure_logging

# ---------------------------------------------------------------------------
# Register built-in compilers with CompilerFactory
# ---------------------------------------------------------------------------

CompilerFactory.register_class("mysql", MySQLTemplateCompiler)
CompilerFactory.register_class("postgres", PostgresTemplateCompiler)
CompilerFactory.register_class("sqlite", SQLiteTemplateCompiler)

__all__ = [
    # Core pipeline
    "build_query",
    "format_value",
    "quote_identifier",
    "resolve_conditionals",
    "tokenize",
    # Skip sentinel
    "SKIP",
    "Skip",
    "skip",
    # Configuration
    "TemplateProfile",
    "TemplateProfileBuilder",
    "configure_logging",
    # Compilation
    "TemplateBuilder",
    "TemplateCompiler",
    "ConditionalResolver",
    "CompilerFactory",
    "MySQLTemplateCompiler",
    "PostgresTemplateCompiler",
    "SQLiteTemplateCompiler",
    # Escaping
    "Escaper",
    "mysql_escape",
    "standard_escape",
    "escaper_from_connection",
    # Errors
    "stitchQLError",
    "FormatError",
    "ArgumentCountError",
    "ProfileConfigError",
    "CompilationError",
]


def _builder(profile: TemplateProfile | None, escape: Escaper | None) -> TemplateBuilder:
    if profile is None:
        profile = TemplateProfile()
    compiler = CompilerFactory.create(profile.target, escape=escape)
    return TemplateBuilder(compiler, profile)


def build_query(
    template: str,
    args: Sequence[Any] = (),
    profile: TemplateProfile | None = None,
    escape: Escaper | None = None,
) -> str:
    """Compile a placeholder template and its arguments to SQL text.

    This is the main entry point::

        sql = stitchql.build_query(
            "UPDATE users SET ?a WHERE id = ?d",
            [{"name": "Jack", "email": None}, 3],
        )
        # UPDATE users SET `name` = 'Jack', `email` = NULL WHERE id = 3

    Args:
        template: SQL with placeholders and optional ``{...}`` fragments.
        args: Arguments, bound to placeholders in order of appearance.
        profile: Optional profile; defaults to ``TemplateProfile()`` (MySQL,
            lenient argument count).
        escape: Optional escaping collaborator overriding the dialect's
            default, e.g. ``escaper_from_connection(conn)``.

    Returns:
        The compiled SQL string.

    Raises:
        FormatError: If an argument does not fit its placeholder.
        ArgumentCountError: In strict mode, on an argument count mismatch.
        CompilationError: If ``profile.target`` is not a registered dialect.
    """
    return _builder(profile, escape).build(template, args)


def format_value(
    value: Any,
    tag: str = "",
    profile: TemplateProfile | None = None,
    escape: Escaper | None = None,
) -> str:
    """Render a single value as it would appear for placeholder ``?<tag>``.

    Raises:
        FormatError: If ``tag`` is unknown or ``value`` does not fit it.
    """
    return _builder(profile, escape).formatter.format(value, tag)


def quote_identifier(value: Any, dialect: str = "mysql") -> str:
    """Quote one identifier, or each of a list joined by ``, ``.

    Embedded quote characters are not escaped.

    Example::

        >>> quote_identifier(["a", "b"])
        '`a`, `b`'
    """
    return _builder(TemplateProfile(target=dialect), None).formatter.identifiers.format(value)
