"""Compiler abstraction: the TemplateCompiler ABC.

A ``TemplateCompiler`` carries the dialect-specific steps the formatter stack
needs (identifier quoting and string escaping).  ``MySQLTemplateCompiler``,
``PostgresTemplateCompiler`` and ``SQLiteTemplateCompiler`` override them.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from stitchql.compile.escaping import Escaper


class TemplateCompiler(ABC):
    """Abstract base for dialect-specific template compilers.

    Args:
        escape: Optional escaping collaborator overriding the dialect default
            (for example one bound to a live connection).
    """

    def __init__(self, escape: Escaper | None = None) -> None:
        self._escape = escape

    @abstractmethod
    def quote_identifier(self, name: str) -> str:
        """Return ``name`` wrapped in the dialect's identifier quotes.

        Embedded quote characters are not escaped.

        Args:
            name: Unquoted identifier (table or column name).

        Returns:
            Quoted identifier.
        """

    @abstractmethod
    def default_escape(self, text: str) -> str:
        """Escape ``text`` for a single-quoted literal when no escaper was injected."""

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (``'mysql'``, ``'postgres'`` or ``'sqlite'``)."""

    def escape_string(self, text: str) -> str:
        """Escape ``text`` with the injected escaper, or the dialect default."""
        if self._escape is not None:
            return self._escape(text)
        return self.default_escape(text)

    def quote_string(self, text: str) -> str:
        """Return ``text`` as a complete single-quoted SQL string literal."""
        return f"'{self.escape_string(text)}'"
