"""PostgreSQL dialect compiler."""

from __future__ import annotations

from stitchql.compile.base import TemplateCompiler
from stitchql.compile.escaping import standard_escape


class PostgresTemplateCompiler(TemplateCompiler):
    """Renders template values for PostgreSQL.

    Assumes ``standard_conforming_strings = on`` (the default since 9.1), so
    single quotes are doubled and backslashes are left alone.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def quote_identifier(self, name: str) -> str:
        return f'"{name}"'

    def default_escape(self, text: str) -> str:
        return standard_escape(text)
