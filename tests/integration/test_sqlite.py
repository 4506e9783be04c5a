"""Integration tests: compile → execute against a real SQLite in-memory DB.

Checks that compiled literals survive a round trip through the database:
quotes, backslashes, NULL, booleans-as-integers, identifier quoting, IN
lists, UPDATE assignment lists and conditional WHERE fragments.
"""
from __future__ import annotations

import sqlite3

import pytest

import stitchql
from stitchql import SKIP, TemplateProfile

PROFILE = TemplateProfile(target="sqlite")

DDL = """
CREATE TABLE users (
    user_id INTEGER PRIMARY KEY,
    name    TEXT NOT NULL,
    email   TEXT,
    score   REAL,
    blocked INTEGER NOT NULL DEFAULT 0
);
"""


def _q(template: str, args=()) -> str:
    return stitchql.build_query(template, args, profile=PROFILE)


@pytest.fixture()
def db() -> sqlite3.Connection:
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.executescript(DDL)
    rows = [
        [1, "Alice", "alice@example.com", 9.5, False],
        [2, "O'Brien", None, 7.25, False],
        [3, "back\\slash", "b@example.com", None, True],
    ]
    for row in rows:
        conn.execute(_q("INSERT INTO users (?#) VALUES (?a)", [
            ["user_id", "name", "email", "score", "blocked"],
            row,
        ]))
    yield conn
    conn.close()


def test_inserted_values_round_trip(db):
    rows = db.execute(_q("SELECT * FROM ?# ORDER BY ?#", ["users", "user_id"])).fetchall()
    assert [tuple(r) for r in rows] == [
        (1, "Alice", "alice@example.com", 9.5, 0),
        (2, "O'Brien", None, 7.25, 0),
        (3, "back\\slash", "b@example.com", None, 1),
    ]


def test_quoted_string_matches(db):
    row = db.execute(_q("SELECT user_id FROM users WHERE name = ?", ["O'Brien"])).fetchone()
    assert row["user_id"] == 2


def test_in_list(db):
    sql = _q("SELECT name FROM users WHERE user_id IN (?a) ORDER BY user_id", [[1, 3]])
    assert [r["name"] for r in db.execute(sql)] == ["Alice", "back\\slash"]


def test_conditional_fragment_skipped_and_kept(db):
    template = "SELECT user_id FROM users WHERE 1 = 1{ AND blocked = ?d}{ AND score > ?f} ORDER BY user_id"

    all_rows = db.execute(_q(template, [SKIP, SKIP])).fetchall()
    assert [r["user_id"] for r in all_rows] == [1, 2, 3]

    blocked = db.execute(_q(template, [True, SKIP])).fetchall()
    assert [r["user_id"] for r in blocked] == [3]

    scored = db.execute(_q(template, [SKIP, 8])).fetchall()
    assert [r["user_id"] for r in scored] == [1]


def test_update_with_assignment_list(db):
    db.execute(_q("UPDATE users SET ?a WHERE user_id = ?d", [{"email": None, "score": 1.5}, 1]))
    row = db.execute(_q("SELECT email, score FROM users WHERE user_id = ?d", [1])).fetchone()
    assert row["email"] is None
    assert row["score"] == 1.5


def test_null_comparison_uses_literal(db):
    row = db.execute(_q("SELECT COUNT(*) AS n FROM users WHERE email IS ?", [None])).fetchone()
    assert row["n"] == 1
