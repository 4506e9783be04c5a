"""Unit tests for argument classification and the skip sentinel."""
from __future__ import annotations

import copy
import pickle
from decimal import Decimal

import pytest

from stitchql.errors import FormatError
from stitchql.schema.values import (
    SKIP,
    BoolValue,
    FloatValue,
    IntValue,
    MappingValue,
    NullValue,
    SequenceValue,
    Skip,
    SkipValue,
    TextValue,
    classify,
    skip,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, NullValue()),
        (True, BoolValue(True)),
        (0, IntValue(0)),
        (1.5, FloatValue(1.5)),
        (Decimal("2.5"), FloatValue(Decimal("2.5"))),
        ("x", TextValue("x")),
        ([1, 2], SequenceValue((1, 2))),
        ((1,), SequenceValue((1,))),
        ({"a": 1}, MappingValue((("a", 1),))),
        (SKIP, SkipValue()),
    ],
)
def test_classify(value, expected):
    assert classify(value) == expected


def test_bool_is_not_classified_as_int():
    assert isinstance(classify(False), BoolValue)


def test_positional_dict_is_sequence():
    assert classify({0: "a", 1: "b"}) == SequenceValue(("a", "b"))


def test_out_of_order_positional_keys_are_mapping():
    assert classify({1: "a", 0: "b"}) == MappingValue(((1, "a"), (0, "b")))


def test_bool_keys_are_not_positions():
    assert isinstance(classify({False: "a", True: "b"}), MappingValue)


def test_empty_collections_are_sequences():
    assert classify([]) == SequenceValue(())
    assert classify({}) == SequenceValue(())


def test_unsupported_kinds_raise():
    with pytest.raises(FormatError, match="Invalid type for placeholder") as exc_info:
        classify({1, 2})
    assert exc_info.value.value_type == "set"


def test_skip_is_a_singleton():
    assert Skip() is SKIP
    assert skip() is SKIP
    assert copy.copy(SKIP) is SKIP
    assert copy.deepcopy(SKIP) is SKIP
    assert pickle.loads(pickle.dumps(SKIP)) is SKIP


def test_skip_has_no_marker_text():
    # the marker comes from the profile, not the sentinel
    assert str(SKIP) == "SKIP"
    assert repr(SKIP) == "SKIP"
    assert SKIP != "/*skip*/"
