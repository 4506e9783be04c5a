"""Template → SQL compilation driver.

``TemplateBuilder`` is the top-level orchestrator.  One ``build()`` call
runs the whole pipeline on fresh local state:

1. **Lex** the template into literal runs, placeholders and braces
   (:func:`~stitchql.compile.lexer.tokenize`).
2. **Substitute**: walk the tokens with an explicit argument cursor.  The
   i-th placeholder, counted across the whole template including fragments,
   binds argument ``i``.  A skip sentinel becomes a
   :class:`~stitchql.compile.lexer.SkipMarkerToken`; anything else is
   rendered by :class:`~stitchql.compile.formatters.ValueFormatter`.
3. **Resolve** ``{...}`` fragments
   (:class:`~stitchql.compile.conditional.ConditionalResolver`).

Argument binding
----------------
Extra arguments are ignored and missing ones render as ``NULL``, unless the
profile sets ``strict_arguments``, in which case any mismatch raises
:class:`~stitchql.errors.ArgumentCountError` before anything is formatted.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from stitchql.compile.base import TemplateCompiler
from stitchql.compile.conditional import ConditionalResolver
from stitchql.compile.context import CompilationContext
from stitchql.compile.formatters import ValueFormatter
from stitchql.compile.lexer import (
    PlaceholderToken,
    RenderedToken,
    SkipMarkerToken,
    Token,
    count_placeholders,
    tokenize,
)
from stitchql.errors import ArgumentCountError, FormatError
from stitchql.schema.profile import TemplateProfile
from stitchql.schema.values import SKIP
from stitchql.utils.logging import get_logger

logger = get_logger(__name__)


class TemplateBuilder:
    """Compiles a placeholder template plus arguments into one SQL string.

    Args:
        compiler: Dialect-specific compiler instance.
        profile: Engine policy; defaults to ``TemplateProfile()`` with the
            compiler's dialect as target.
    """

    def __init__(
        self,
        compiler: TemplateCompiler,
        profile: TemplateProfile | None = None,
    ) -> None:
        if profile is None:
            profile = TemplateProfile(target=compiler.dialect_name)
        self._ctx = CompilationContext(compiler=compiler, profile=profile)
        self._formatter = ValueFormatter(self._ctx)
        self._resolver = ConditionalResolver(profile.skip_marker)

    @property
    def profile(self) -> TemplateProfile:
        return self._ctx.profile

    @property
    def formatter(self) -> ValueFormatter:
        return self._formatter

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, template: str, args: Sequence[Any] = ()) -> str:
        """Compile ``template`` with ``args`` to SQL text.

        Args:
            template: Template with ``?``, ``?d``, ``?f``, ``?a``, ``?#``
                placeholders and optional ``{...}`` fragments.
            args: One argument per placeholder, in order of appearance.

        Returns:
            The compiled SQL.

        Raises:
            FormatError: If any argument cannot be rendered for its
                placeholder.  Nothing is returned in that case.
            ArgumentCountError: In strict mode, if the argument count does
                not match the placeholder count.
        """
        args = tuple(args)
        tokens = tokenize(template)
        placeholder_count = count_placeholders(tokens)
        self._check_argument_count(placeholder_count, len(args))

        logger.debug(
            "Compiling template with %d placeholder(s) and %d argument(s)",
            placeholder_count,
            len(args),
        )
        substituted = self._substitute(tokens, args)
        return self._resolver.resolve(substituted)

    # ------------------------------------------------------------------
    # Pass 1: placeholder substitution
    # ------------------------------------------------------------------

    def _substitute(self, tokens: list[Token], args: tuple[Any, ...]) -> list[Token]:
        out: list[Token] = []
        cursor = 0
        for token in tokens:
            if isinstance(token, PlaceholderToken):
                value, cursor = self._next_argument(args, cursor)
                out.append(self._bind(token, value))
            else:
                out.append(token)
        return out

    @staticmethod
    def _next_argument(args: tuple[Any, ...], cursor: int) -> tuple[Any, int]:
        value = args[cursor] if cursor < len(args) else None
        return value, cursor + 1

    def _bind(self, token: PlaceholderToken, value: Any) -> Token:
        if value is SKIP:
            return SkipMarkerToken(self._ctx.profile.skip_marker)
        try:
            return RenderedToken(self._formatter.format(value, token.tag))
        except FormatError as exc:
            logger.debug(
                "Placeholder %s #%d at offset %d failed: %s",
                token.text,
                token.index,
                token.offset,
                exc,
            )
            raise exc.annotate(tag=token.tag, position=token.index)

    def _check_argument_count(self, expected: int, received: int) -> None:
        if expected == received:
            return
        if self._ctx.profile.strict_arguments:
            raise ArgumentCountError(expected=expected, received=received)
        if received < expected:
            logger.warning(
                "Template has %d placeholder(s) but only %d argument(s); "
                "missing values render as NULL",
                expected,
                received,
            )
        else:
            logger.debug("Ignoring %d extra argument(s)", received - expected)
