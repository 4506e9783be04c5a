"""SQLite dialect compiler."""
from __future__ import annotations

from stitchql.compile.base import TemplateCompiler
from stitchql.compile.escaping import standard_escape


class SQLiteTemplateCompiler(TemplateCompiler):
    """Renders template values for SQLite.

    Note: SQLite string literals have no backslash escapes; doubling the
    single quote is the only escape.
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    def quote_identifier(self, name: str) -> str:
        return f'"{name}"'

    def default_escape(self, text: str) -> str:
        return standard_escape(text)
