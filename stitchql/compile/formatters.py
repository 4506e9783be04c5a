"""Value, array and identifier formatters.

``ValueFormatter`` is the entry point: it dispatches on the placeholder tag
and delegates ``?a`` to :class:`ArrayFormatter` and ``?#`` to
:class:`IdentifierFormatter`.  Array elements are rendered with the bare
``?`` rule, so ``ArrayFormatter`` receives ``ValueFormatter.format_bare``.

All three receive a :class:`~stitchql.compile.context.CompilationContext`
and keep no per-call state, so one instance can serve any number of
concurrent ``build`` calls.

Tag summary
-----------
``?d``  integer (truncated toward zero), ``NULL`` for ``None``
``?f``  float, ``NULL`` for ``None``
``?a``  sequence → ``v1, v2``; mapping → ``<k1> = v1, <k2> = v2``
``?#``  identifier or list of identifiers
``?``   ``NULL``, ``1``/``0``, number, or quoted and escaped string
"""
from __future__ import annotations

import math
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any

from stitchql.compile.context import CompilationContext
from stitchql.errors import FormatError
from stitchql.schema.values import (
    BoolValue,
    FloatValue,
    IntValue,
    MappingValue,
    NullValue,
    SequenceValue,
    SkipValue,
    TextValue,
    classify,
)

NULL = "NULL"


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_finite(number: float | Decimal) -> bool:
    if isinstance(number, Decimal):
        return number.is_finite()
    return math.isfinite(number)


def _int_literal(number: int) -> str:
    """Decimal text of an integer; very long integers exceed the str() digit limit."""
    try:
        return str(number)
    except ValueError as exc:
        raise FormatError(
            "Integer is too large to render as a SQL literal",
            value_type="int",
        ) from exc


def _parse_number(text: str, tag: str) -> int | float:
    """Parse a numeric string for ``?d`` / ``?f``."""
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError as exc:
        raise FormatError(
            f"Cannot convert {text!r} to a number for ?{tag}",
            tag=tag,
            value_type="str",
        ) from exc


# ---------------------------------------------------------------------------
# Identifier formatter
# ---------------------------------------------------------------------------


class IdentifierFormatter:
    """Quotes one name, or each name of a list, as SQL identifiers.

    Args:
        ctx: Compilation context supplying the dialect's quoting.
    """

    def __init__(self, ctx: CompilationContext) -> None:
        self._ctx = ctx

    def format(self, value: Any) -> str:
        """Quote ``value``; a sequence of names becomes a ``, ``-joined list."""
        sql_value = classify(value)
        if isinstance(sql_value, SequenceValue):
            return ", ".join(self.quote(name) for name in sql_value.items)
        return self.quote(value)

    def quote(self, name: Any) -> str:
        """Quote a single name.  ``int`` names (mapping keys) are stringified."""
        if isinstance(name, bool) or not isinstance(name, (str, int)):
            raise FormatError(
                f"Identifier must be a string, got {_type_name(name)}",
                value_type=_type_name(name),
            )
        text = name if isinstance(name, str) else _int_literal(name)
        return self._ctx.compiler.quote_identifier(text)


# ---------------------------------------------------------------------------
# Array formatter
# ---------------------------------------------------------------------------


class ArrayFormatter:
    """Renders a sequence as a literal list or a mapping as assignment pairs.

    Args:
        ctx: Compilation context (``allow_empty_arrays`` policy).
        identifiers: Formatter used for mapping keys.
        format_element: Bare-rule formatter used for every element value.
    """

    def __init__(
        self,
        ctx: CompilationContext,
        identifiers: IdentifierFormatter,
        format_element: Callable[[Any], str],
    ) -> None:
        self._ctx = ctx
        self._identifiers = identifiers
        self._format_element = format_element

    def format(self, value: Any) -> str:
        """Render ``value`` for an ``?a`` placeholder.

        Raises:
            FormatError: If ``value`` is not a sequence or mapping, or is
                empty while the profile forbids empty arrays.
        """
        sql_value = classify(value)
        if isinstance(sql_value, SequenceValue):
            if not sql_value.items and not self._ctx.profile.allow_empty_arrays:
                raise FormatError("Empty collection given for ?a", tag="a", value_type=_type_name(value))
            return ", ".join(self._format_element(item) for item in sql_value.items)
        if isinstance(sql_value, MappingValue):
            return ", ".join(
                f"{self._identifiers.quote(key)} = {self._format_element(item)}"
                for key, item in sql_value.pairs
            )
        raise FormatError(
            "Expected a sequence or mapping for ?a",
            tag="a",
            value_type=_type_name(value),
        )


# ---------------------------------------------------------------------------
# Value formatter
# ---------------------------------------------------------------------------


class ValueFormatter:
    """Converts one argument plus a type tag into SQL literal text.

    Args:
        ctx: Compilation context (dialect compiler + profile).
    """

    def __init__(self, ctx: CompilationContext) -> None:
        self._ctx = ctx
        self._identifiers = IdentifierFormatter(ctx)
        self._arrays = ArrayFormatter(ctx, self._identifiers, self.format_bare)

    @property
    def identifiers(self) -> IdentifierFormatter:
        return self._identifiers

    def format(self, value: Any, tag: str = "") -> str:
        """Render ``value`` for a placeholder with type tag ``tag``.

        Raises:
            FormatError: If the tag is unknown or the value does not fit it.
        """
        handler = self._handlers().get(tag)
        if handler is None:
            raise FormatError(f"Unknown placeholder tag: ?{tag}", tag=tag)
        try:
            return handler(value)
        except FormatError as exc:
            raise exc.annotate(tag=tag)

    def _handlers(self) -> dict[str, Callable[[Any], str]]:
        return {
            "": self.format_bare,
            "d": self.format_int,
            "f": self.format_float,
            "a": self._arrays.format,
            "#": self._identifiers.format,
        }

    def format_bare(self, value: Any) -> str:
        """Render ``value`` for a bare ``?`` placeholder."""
        sql_value = classify(value)
        if isinstance(sql_value, NullValue):
            return NULL
        if isinstance(sql_value, BoolValue):
            return "1" if sql_value.value else "0"
        if isinstance(sql_value, IntValue):
            return _int_literal(sql_value.value)
        if isinstance(sql_value, FloatValue):
            return self._number_literal(sql_value.value)
        if isinstance(sql_value, TextValue):
            return self._ctx.compiler.quote_string(sql_value.value)
        if isinstance(sql_value, (SequenceValue, MappingValue, SkipValue)):
            raise FormatError(
                "Invalid type for placeholder",
                value_type=_type_name(value),
            )
        raise FormatError(f"Unhandled value variant: {type(sql_value).__name__}")

    def format_int(self, value: Any) -> str:
        """Render ``value`` for ``?d``: truncated toward zero."""
        sql_value = classify(value)
        if isinstance(sql_value, NullValue):
            return NULL
        if isinstance(sql_value, BoolValue):
            return "1" if sql_value.value else "0"
        if isinstance(sql_value, IntValue):
            return _int_literal(sql_value.value)
        if isinstance(sql_value, FloatValue):
            return _int_literal(self._truncate(sql_value.value))
        if isinstance(sql_value, TextValue):
            number = _parse_number(sql_value.value, "d")
            if isinstance(number, int):
                return _int_literal(number)
            return _int_literal(self._truncate(number))
        raise FormatError(
            "Expected a number for ?d",
            tag="d",
            value_type=_type_name(value),
        )

    def format_float(self, value: Any) -> str:
        """Render ``value`` for ``?f`` using Python's float text form."""
        sql_value = classify(value)
        if isinstance(sql_value, NullValue):
            return NULL
        if isinstance(sql_value, (BoolValue, IntValue, FloatValue)):
            number = sql_value.value
        elif isinstance(sql_value, TextValue):
            number = _parse_number(sql_value.value, "f")
        else:
            raise FormatError(
                "Expected a number for ?f",
                tag="f",
                value_type=_type_name(value),
            )
        try:
            as_float = float(number)
        except OverflowError as exc:
            raise FormatError("Number out of float range for ?f", tag="f") from exc
        return self._number_literal(as_float)

    # ------------------------------------------------------------------
    # Number helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _truncate(number: float | Decimal) -> int:
        if not _is_finite(number):
            raise FormatError(f"Cannot convert {number!r} to an integer for ?d", tag="d")
        try:
            return int(number)
        except (OverflowError, InvalidOperation) as exc:
            raise FormatError(f"Cannot convert {number!r} to an integer for ?d", tag="d") from exc

    @staticmethod
    def _number_literal(number: float | Decimal) -> str:
        if not _is_finite(number):
            raise FormatError(
                f"{number!r} has no SQL literal form",
                value_type=_type_name(number),
            )
        if isinstance(number, Decimal):
            return str(number)
        return repr(number)
