"""Custom exception hierarchy for stitchQL.

All public errors inherit from stitchQLError so callers can catch the base
class for any stitchQL-specific failure.
"""
from __future__ import annotations

from typing import Any


class stitchQLError(Exception):
    """Base exception for all stitchQL errors."""


class FormatError(stitchQLError):
    """Raised when an argument cannot be rendered for its placeholder.

    Any ``FormatError`` aborts the whole ``build_query`` call; no partial
    SQL is ever returned.

    Args:
        message: Human-readable description.
        tag: The placeholder type tag (``""``, ``"d"``, ``"f"``, ``"a"``, ``"#"``).
        position: Zero-based index of the placeholder in the template, when known.
        value_type: Python type name of the offending argument, when known.
    """

    code = "FORMAT_ERROR"

    def __init__(
        self,
        message: str,
        tag: str | None = None,
        position: int | None = None,
        value_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.tag = tag
        self.position = position
        self.value_type = value_type

    @property
    def details(self) -> dict[str, Any]:
        details: dict[str, Any] = {}
        if self.tag is not None:
            details["placeholder"] = f"?{self.tag}"
        if self.position is not None:
            details["position"] = self.position
        if self.value_type is not None:
            details["value_type"] = self.value_type
        return details

    def annotate(self, tag: str | None = None, position: int | None = None) -> FormatError:
        """Fill in placeholder context the raising formatter did not know."""
        if self.tag is None:
            self.tag = tag
        if self.position is None:
            self.position = position
        return self

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response for logs or API payloads."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class ArgumentCountError(FormatError):
    """Raised in strict mode when placeholders and arguments do not pair up.

    Args:
        expected: Number of placeholders found in the template.
        received: Number of arguments supplied.
    """

    code = "ARGUMENT_COUNT"

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(
            f"Template has {expected} placeholder(s) but {received} argument(s) were given."
        )
        self.expected = expected
        self.received = received

    @property
    def details(self) -> dict[str, Any]:
        return {"expected": self.expected, "received": self.received}


class ProfileConfigError(stitchQLError):
    """Raised when a TemplateProfile is misconfigured.

    Detected at :meth:`TemplateProfileBuilder.build` time, before any
    template is compiled.

    Args:
        message: Human-readable description.
        field: The profile field that holds the bad value.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class CompilationError(stitchQLError):
    """Raised when a template compiler cannot be resolved or configured.

    Args:
        message: Human-readable description.
        target: The dialect target involved, when known.
    """

    def __init__(self, message: str, target: str | None = None) -> None:
        super().__init__(message)
        self.target = target
