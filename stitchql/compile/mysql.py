"""MySQL dialect compiler."""

from __future__ import annotations

from stitchql.compile.base import TemplateCompiler
from stitchql.compile.escaping import mysql_escape


class MySQLTemplateCompiler(TemplateCompiler):
    """Renders template values for MySQL / MariaDB.

    Identifiers are quoted with backticks (`` ` ``).  String literals are
    backslash-escaped with PyMySQL's ``escape_string`` unless a
    connection-bound escaper is injected.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    def quote_identifier(self, name: str) -> str:
        return f"`{name}`"

    def default_escape(self, text: str) -> str:
        return mysql_escape(text)
