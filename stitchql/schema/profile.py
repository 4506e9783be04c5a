"""Pydantic model for the TemplateProfile that configures a compile run.

The profile selects the target dialect (identifier quoting and default string
escaping) and the policy knobs of the substitution engine.  Create one
directly or through the builder::

    from stitchql import TemplateProfile

    # MySQL, lenient: missing arguments become NULL
    profile = TemplateProfile()

    # PostgreSQL, every placeholder must have exactly one argument
    profile = (
        TemplateProfile.builder("postgres")
        .strict()
        .forbid_empty_arrays()
        .build()
    )
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from stitchql.errors import ProfileConfigError
from stitchql.schema.values import DEFAULT_SKIP_MARKER

# Characters the lexer treats as syntax; a marker holding one would be
# re-read as a placeholder or a fragment boundary.
_RESERVED_MARKER_CHARS = frozenset("{}?")


def _marker_problem(marker: str) -> str | None:
    if not marker:
        return "skip_marker must not be empty."
    reserved = sorted(_RESERVED_MARKER_CHARS & set(marker))
    if reserved:
        return f"skip_marker must not contain template syntax characters {reserved}."
    return None


class TemplateProfile(BaseModel):
    """Configuration for a single template compiler.

    Attributes:
        target: Registered dialect to render for (built in: ``'mysql'``,
            ``'postgres'``, ``'sqlite'``).
        skip_marker: Text that stands in for a skipped placeholder until its
            fragment is resolved.  Left in the output when the placeholder
            sits outside any ``{...}`` fragment.
        strict_arguments: Raise ``ArgumentCountError`` when the number of
            arguments differs from the number of placeholders.  When off,
            missing arguments render as ``NULL`` and extras are ignored.
        allow_empty_arrays: Render an empty collection bound to ``?a`` as an
            empty string.  When off, it raises ``FormatError``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: str = "mysql"
    skip_marker: str = DEFAULT_SKIP_MARKER
    strict_arguments: bool = False
    allow_empty_arrays: bool = True

    @field_validator("skip_marker")
    @classmethod
    def _check_skip_marker(cls, value: str) -> str:
        problem = _marker_problem(value)
        if problem:
            raise ValueError(problem)
        return value

    @classmethod
    def builder(cls, target: str = "mysql") -> "TemplateProfileBuilder":
        """Return a :class:`TemplateProfileBuilder` for ``target``.

        Args:
            target: Registered compiler target name.

        Returns:
            A fresh builder with lenient defaults.
        """
        return TemplateProfileBuilder(target=target)


class TemplateProfileBuilder:
    """Fluent builder for :class:`TemplateProfile`.

    Always obtained via :meth:`TemplateProfile.builder`.  Methods can be
    chained in any order::

        profile = TemplateProfile.builder("sqlite").skip_marker("/*-*/").build()
    """

    def __init__(self, target: str) -> None:
        self._target = target
        self._skip_marker = DEFAULT_SKIP_MARKER
        self._strict_arguments = False
        self._allow_empty_arrays = True

    def strict(self) -> "TemplateProfileBuilder":
        """Require exactly one argument per placeholder."""
        self._strict_arguments = True
        return self

    def forbid_empty_arrays(self) -> "TemplateProfileBuilder":
        """Reject empty collections bound to ``?a``."""
        self._allow_empty_arrays = False
        return self

    def skip_marker(self, marker: str) -> "TemplateProfileBuilder":
        """Use ``marker`` as the textual form of the skip sentinel."""
        self._skip_marker = marker
        return self

    def build(self) -> TemplateProfile:
        """Validate the configuration and return the :class:`TemplateProfile`.

        Raises:
            ProfileConfigError: If the skip marker is empty or contains
                template syntax characters.
        """
        problem = _marker_problem(self._skip_marker)
        if problem:
            raise ProfileConfigError(problem, field="skip_marker")
        return TemplateProfile(
            target=self._target,
            skip_marker=self._skip_marker,
            strict_arguments=self._strict_arguments,
            allow_empty_arrays=self._allow_empty_arrays,
        )
