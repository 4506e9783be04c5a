"""Unit tests for the template lexer."""
from __future__ import annotations

from stitchql.compile.lexer import (
    BraceCloseToken,
    BraceOpenToken,
    LiteralToken,
    PlaceholderToken,
    count_placeholders,
    tokenize,
)


def _text(tokens) -> str:
    return "".join(t.text for t in tokens)


def test_plain_text_is_one_literal():
    assert tokenize("SELECT 1") == [LiteralToken("SELECT 1")]


def test_empty_template():
    assert tokenize("") == []


def test_every_tag_is_recognised():
    tokens = tokenize("?d?f?a?#?")
    assert [t.tag for t in tokens] == ["d", "f", "a", "#", ""]
    assert [t.index for t in tokens] == [0, 1, 2, 3, 4]


def test_unknown_char_after_question_mark_stays_literal():
    tokens = tokenize("x = ?x")
    assert tokens == [
        LiteralToken("x = "),
        PlaceholderToken(tag="", index=0, offset=4),
        LiteralToken("x"),
    ]


def test_placeholder_offsets():
    tokens = [t for t in tokenize("a = ?d AND b = ?") if isinstance(t, PlaceholderToken)]
    assert [t.offset for t in tokens] == [4, 15]


def test_braces_become_tokens():
    tokens = tokenize("A{ AND x = ?d}B")
    assert tokens == [
        LiteralToken("A"),
        BraceOpenToken(),
        LiteralToken(" AND x = "),
        PlaceholderToken(tag="d", index=0, offset=11),
        BraceCloseToken(),
        LiteralToken("B"),
    ]


def test_placeholder_indexes_run_across_fragments():
    tokens = tokenize("?{ ?d }{ ?f }?a")
    placeholders = [t for t in tokens if isinstance(t, PlaceholderToken)]
    assert [(t.index, t.tag) for t in placeholders] == [(0, ""), (1, "d"), (2, "f"), (3, "a")]
    assert count_placeholders(tokens) == 4


def test_concatenated_text_reproduces_template():
    template = "SELECT ?# FROM t WHERE a = ?{ AND b IN (?a)}} {{?f"
    assert _text(tokenize(template)) == template


def test_placeholders_disabled_treats_question_mark_as_text():
    tokens = tokenize("a = ?d {b}", placeholders=False)
    assert count_placeholders(tokens) == 0
    assert tokens[0] == LiteralToken("a = ?d ")


def test_trailing_question_mark():
    tokens = tokenize("a = ?")
    assert tokens[-1] == PlaceholderToken(tag="", index=0, offset=4)
