"""Unit tests for conditional fragment resolution."""
from __future__ import annotations

from stitchql.compile.conditional import ConditionalResolver, resolve_conditionals
from stitchql.compile.lexer import (
    BraceCloseToken,
    BraceOpenToken,
    LiteralToken,
    RenderedToken,
    SkipMarkerToken,
)


def test_brace_free_text_is_unchanged():
    text = "SELECT * FROM t WHERE a = 1"
    assert resolve_conditionals(text) == text


def test_fragment_without_marker_is_unwrapped():
    assert resolve_conditionals("A{ AND x = 5}B") == "A AND x = 5B"


def test_fragment_with_marker_is_dropped():
    assert resolve_conditionals("A{ AND x = /*skip*/}B") == "AB"


def test_fragments_are_independent():
    text = "WHERE 1{ AND a = /*skip*/}{ AND b = 2}{ AND c = /*skip*/}"
    assert resolve_conditionals(text) == "WHERE 1 AND b = 2"


def test_nested_braces_resolve_innermost_only():
    assert resolve_conditionals("{a{b}c}") == "{abc}"
    assert resolve_conditionals("{a{/*skip*/}c}") == "{ac}"


def test_unmatched_braces_stay_literal():
    assert resolve_conditionals("a } b") == "a } b"
    assert resolve_conditionals("a { b") == "a { b"
    assert resolve_conditionals("}{x}{") == "}x{"


def test_empty_fragment():
    assert resolve_conditionals("a{}b") == "ab"


def test_marker_outside_fragment_is_kept():
    assert resolve_conditionals("a = /*skip*/") == "a = /*skip*/"


def test_custom_marker():
    assert resolve_conditionals("x{ AND y = <none>}", skip_marker="<none>") == "x"
    assert resolve_conditionals("x{ AND y = /*skip*/}", skip_marker="<none>") == "x AND y = /*skip*/"


def test_resolve_is_idempotent_on_output():
    once = resolve_conditionals("a{ b}{ /*skip*/} c")
    assert resolve_conditionals(once) == once


def test_skip_token_drops_fragment():
    resolver = ConditionalResolver()
    tokens = [
        LiteralToken("SELECT 1"),
        BraceOpenToken(),
        LiteralToken(" AND x = "),
        SkipMarkerToken("/*skip*/"),
        BraceCloseToken(),
    ]
    assert resolver.resolve(tokens) == "SELECT 1"


def test_rendered_value_containing_marker_does_not_drop_fragment():
    resolver = ConditionalResolver()
    tokens = [
        BraceOpenToken(),
        LiteralToken("note = "),
        RenderedToken("'/*skip*/'"),
        BraceCloseToken(),
    ]
    assert resolver.resolve(tokens) == "note = '/*skip*/'"
