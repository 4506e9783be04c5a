"""Conditional fragment resolution.

A fragment is a ``{``...``}`` span that contains no other brace.  Fragments
are resolved independently, left to right, in one pass:

- a fragment holding the skip marker is dropped, braces included;
- any other fragment is kept with its braces stripped.

Braces that never pair up (a ``}`` with no open fragment, a ``{`` followed by
another ``{`` before any ``}``, a trailing ``{``) are left in the output as
literal text, so ``{a{b}c}`` resolves to ``{abc}``.

Only template text and skipped placeholders can mark a fragment for removal.
Formatted argument values never do, even when a string argument happens to
contain the marker text.
"""
from __future__ import annotations

from stitchql.compile.lexer import (
    OPEN_BRACE,
    BraceCloseToken,
    BraceOpenToken,
    LiteralToken,
    SkipMarkerToken,
    Token,
    tokenize,
)
from stitchql.schema.values import DEFAULT_SKIP_MARKER
from stitchql.utils.logging import get_logger

logger = get_logger(__name__)


class ConditionalResolver:
    """Resolves ``{...}`` fragments in a token stream.

    Args:
        skip_marker: Textual form of the skip sentinel.
    """

    def __init__(self, skip_marker: str = DEFAULT_SKIP_MARKER) -> None:
        self._skip_marker = skip_marker

    def resolve(self, tokens: list[Token]) -> str:
        """Resolve every fragment in ``tokens`` and return the joined text."""
        out: list[str] = []
        fragment: list[Token] | None = None
        dropped = 0

        for token in tokens:
            if isinstance(token, BraceOpenToken):
                if fragment is not None:
                    # an inner "{" demotes the pending one to plain text
                    out.append(OPEN_BRACE)
                    out.extend(t.text for t in fragment)
                fragment = []
            elif isinstance(token, BraceCloseToken):
                if fragment is None:
                    out.append(token.text)
                elif self._is_skipped(fragment):
                    dropped += 1
                    fragment = None
                else:
                    out.extend(t.text for t in fragment)
                    fragment = None
            elif fragment is not None:
                fragment.append(token)
            else:
                out.append(token.text)

        if fragment is not None:
            out.append(OPEN_BRACE)
            out.extend(t.text for t in fragment)

        if dropped:
            logger.debug("Dropped %d conditional fragment(s)", dropped)
        return "".join(out)

    def _is_skipped(self, fragment: list[Token]) -> bool:
        for token in fragment:
            if isinstance(token, SkipMarkerToken):
                return True
            if isinstance(token, LiteralToken) and self._skip_marker in token.text:
                return True
        return False


def resolve_conditionals(text: str, skip_marker: str = DEFAULT_SKIP_MARKER) -> str:
    """Resolve the ``{...}`` fragments of already-substituted SQL text.

    ``?`` has no meaning here; the marker is detected as plain text.

    Example::

        >>> resolve_conditionals("SELECT 1{ AND a = /*skip*/}{ AND b = 2}")
        'SELECT 1 AND b = 2'
    """
    return ConditionalResolver(skip_marker).resolve(tokenize(text, placeholders=False))
