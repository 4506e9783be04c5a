"""String-literal escaping collaborators.

An escaper maps raw text to the body of a single-quoted SQL string literal;
the formatter adds the surrounding quotes.  Any ``Callable[[str], str]`` can
be injected into a compiler, so applications holding a live connection can
use the server's own charset-aware escaping::

    conn = pymysql.connect(...)
    compiler = MySQLTemplateCompiler(escape=escaper_from_connection(conn))
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pymysql.converters import escape_string

from stitchql.errors import FormatError

#: Maps raw text to an escaped literal body (no surrounding quotes).
Escaper = Callable[[str], str]


def mysql_escape(text: str) -> str:
    """Escape ``text`` the way MySQL's client library does.

    Quotes, backslash, NUL, newline, carriage return and Ctrl-Z are
    backslash-escaped.
    """
    return escape_string(text)


def standard_escape(text: str) -> str:
    """Escape ``text`` for standard-conforming string literals (PostgreSQL, SQLite).

    Single quotes are doubled; backslash has no special meaning.

    Raises:
        FormatError: If ``text`` contains a NUL character, which neither
            PostgreSQL nor SQLite can store in a text literal.
    """
    if "\x00" in text:
        raise FormatError("NUL character cannot be embedded in a string literal", value_type="str")
    return text.replace("'", "''")


def escaper_from_connection(connection: Any) -> Escaper:
    """Adapt a DB-API connection exposing ``escape_string`` into an :data:`Escaper`.

    ``pymysql.Connection.escape_string`` honours the server's
    ``NO_BACKSLASH_ESCAPES`` mode, which the static :func:`mysql_escape`
    cannot know about.

    A ``bytes`` result (as from mysqlclient) is decoded with the
    connection's ``encoding``, falling back to UTF-8.

    Raises:
        TypeError: If ``connection`` has no ``escape_string`` method.
    """
    method = getattr(connection, "escape_string", None)
    if not callable(method):
        raise TypeError(
            f"{type(connection).__name__} does not provide escape_string(); "
            "pass an explicit escape callable instead."
        )

    encoding = getattr(connection, "encoding", None) or "utf-8"

    def _escape(text: str) -> str:
        escaped = method(text)
        # mysqlclient returns bytes
        if isinstance(escaped, bytes):
            return escaped.decode(encoding)
        if not isinstance(escaped, str):
            raise TypeError(
                f"escape_string() returned {type(escaped).__name__}, expected str or bytes"
            )
        return escaped

    return _escape
