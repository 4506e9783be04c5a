"""Typed argument values for template placeholders.

Arguments arrive as plain Python objects.  Before any formatting happens they
are classified into a closed set of variants so that every formatter can
dispatch exhaustively instead of probing runtime types ad hoc::

    from stitchql.schema.values import classify, TextValue

    assert classify("O'Brien") == TextValue("O'Brien")

Mappings whose keys are exactly ``0..n-1`` in insertion order are list-like
and classify as :class:`SequenceValue`; every other ``dict`` is a
:class:`MappingValue`.  Empty collections are sequences.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

from stitchql.errors import FormatError

#: Default textual form of the skip sentinel inside compiled SQL.
DEFAULT_SKIP_MARKER = "/*skip*/"


# ---------------------------------------------------------------------------
# Skip sentinel
# ---------------------------------------------------------------------------


class Skip:
    """The skip sentinel type.  Only one instance, :data:`SKIP`, ever exists.

    It has no textual form of its own; compiled SQL carries the profile's
    ``skip_marker`` in its place.
    """

    _instance: Skip | None = None

    def __new__(cls) -> Skip:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"

    def __copy__(self) -> Skip:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Skip:
        return self

    def __reduce__(self) -> str:
        return "SKIP"


#: Pass as an argument to drop the ``{...}`` fragment holding its placeholder.
SKIP = Skip()


def skip() -> Skip:
    """Return the skip sentinel."""
    return SKIP


# ---------------------------------------------------------------------------
# Value variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NullValue:
    """SQL ``NULL`` (``None`` or a missing argument)."""


@dataclass(frozen=True)
class BoolValue:
    value: bool


@dataclass(frozen=True)
class IntValue:
    value: int


@dataclass(frozen=True)
class FloatValue:
    """A non-integer number: ``float`` or ``decimal.Decimal``."""

    value: float | Decimal


@dataclass(frozen=True)
class TextValue:
    value: str


@dataclass(frozen=True)
class SequenceValue:
    """A list-like collection; ``items`` are raw, unclassified elements."""

    items: tuple[Any, ...]


@dataclass(frozen=True)
class MappingValue:
    """A keyed collection; ``pairs`` preserve the caller's iteration order."""

    pairs: tuple[tuple[Any, Any], ...]


@dataclass(frozen=True)
class SkipValue:
    """The skip sentinel bound to a placeholder."""


SQLValue = Union[
    NullValue,
    BoolValue,
    IntValue,
    FloatValue,
    TextValue,
    SequenceValue,
    MappingValue,
    SkipValue,
]


def _is_list_like(mapping: Mapping[Any, Any]) -> bool:
    # bool keys compare equal to 0/1 but are not positional indexes
    return all(
        type(key) is int and key == index for index, key in enumerate(mapping)
    )


def classify(value: Any) -> SQLValue:
    """Classify a raw argument into its :data:`SQLValue` variant.

    Raises:
        FormatError: If ``value`` is of a kind no placeholder can render.
    """
    if value is SKIP:
        return SkipValue()
    if value is None:
        return NullValue()
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return BoolValue(value)
    if isinstance(value, int):
        return IntValue(value)
    if isinstance(value, (float, Decimal)):
        return FloatValue(value)
    if isinstance(value, str):
        return TextValue(value)
    if isinstance(value, (list, tuple)):
        return SequenceValue(tuple(value))
    if isinstance(value, Mapping):
        if _is_list_like(value):
            return SequenceValue(tuple(value.values()))
        return MappingValue(tuple(value.items()))
    raise FormatError(
        "Invalid type for placeholder",
        value_type=type(value).__name__,
    )
