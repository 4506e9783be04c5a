"""Single-pass template lexer.

``tokenize`` walks the template once, left to right, and splits it into a
flat token stream:

- :class:`LiteralToken`: a run of plain template text.
- :class:`PlaceholderToken`: ``?`` plus an optional type tag (``d``, ``f``,
  ``a``, ``#``).  Any other character after ``?`` is not a tag; it stays in
  the following literal run.
- :class:`BraceOpenToken` / :class:`BraceCloseToken`: fragment delimiters.
  The lexer does not pair them; :mod:`stitchql.compile.conditional` does.

The substitution driver replaces placeholder tokens with
:class:`RenderedToken` or :class:`SkipMarkerToken` before the conditional
pass, so every stage works on the same token types.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

#: Characters that may follow ``?`` as a type tag.
TYPE_TAGS = frozenset("dfa#")

PLACEHOLDER_CHAR = "?"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"


@dataclass(frozen=True)
class LiteralToken:
    text: str


@dataclass(frozen=True)
class PlaceholderToken:
    """A placeholder occurrence.

    Attributes:
        tag: Type tag, ``""`` for a bare ``?``.
        index: Zero-based ordinal among the template's placeholders.
        offset: Character offset of the ``?`` in the template.
    """

    tag: str
    index: int
    offset: int

    @property
    def text(self) -> str:
        return f"{PLACEHOLDER_CHAR}{self.tag}"


@dataclass(frozen=True)
class BraceOpenToken:
    text: str = OPEN_BRACE


@dataclass(frozen=True)
class BraceCloseToken:
    text: str = CLOSE_BRACE


@dataclass(frozen=True)
class RenderedToken:
    """A formatted argument value that replaced a placeholder."""

    text: str


@dataclass(frozen=True)
class SkipMarkerToken:
    """The skip sentinel's textual form standing where a placeholder was."""

    text: str


Token = Union[
    LiteralToken,
    PlaceholderToken,
    BraceOpenToken,
    BraceCloseToken,
    RenderedToken,
    SkipMarkerToken,
]


def tokenize(template: str, placeholders: bool = True) -> list[Token]:
    """Split ``template`` into a token stream in a single pass.

    Args:
        template: The template text.
        placeholders: Recognise ``?`` placeholders.  Pass ``False`` to lex
            already-substituted SQL where ``?`` is ordinary text.

    Returns:
        Tokens in template order.  Concatenating their ``text`` reproduces
        ``template`` exactly.
    """
    specials = {OPEN_BRACE, CLOSE_BRACE}
    if placeholders:
        specials.add(PLACEHOLDER_CHAR)

    tokens: list[Token] = []
    length = len(template)
    literal_start = 0
    placeholder_index = 0
    pos = 0

    while pos < length:
        char = template[pos]
        if char not in specials:
            pos += 1
            continue

        if pos > literal_start:
            tokens.append(LiteralToken(template[literal_start:pos]))

        if char == PLACEHOLDER_CHAR:
            following = template[pos + 1] if pos + 1 < length else ""
            tag = following if following in TYPE_TAGS else ""
            tokens.append(PlaceholderToken(tag=tag, index=placeholder_index, offset=pos))
            placeholder_index += 1
            pos += 1 + len(tag)
        elif char == OPEN_BRACE:
            tokens.append(BraceOpenToken())
            pos += 1
        else:
            tokens.append(BraceCloseToken())
            pos += 1
        literal_start = pos

    if literal_start < length:
        tokens.append(LiteralToken(template[literal_start:]))
    return tokens


def count_placeholders(tokens: list[Token]) -> int:
    """Return the number of :class:`PlaceholderToken` entries in ``tokens``."""
    return sum(1 for token in tokens if isinstance(token, PlaceholderToken))
