"""stitchQL schema models: TemplateProfile and the typed argument values."""
from stitchql.schema.profile import TemplateProfile, TemplateProfileBuilder
from stitchql.schema.values import (
    DEFAULT_SKIP_MARKER,
    SKIP,
    BoolValue,
    FloatValue,
    IntValue,
    MappingValue,
    NullValue,
    SequenceValue,
    Skip,
    SkipValue,
    SQLValue,
    TextValue,
    classify,
    skip,
)

__all__ = [
    "TemplateProfile",
    "TemplateProfileBuilder",
    "DEFAULT_SKIP_MARKER",
    "SKIP",
    "Skip",
    "skip",
    "classify",
    "SQLValue",
    "NullValue",
    "BoolValue",
    "IntValue",
    "FloatValue",
    "TextValue",
    "SequenceValue",
    "MappingValue",
    "SkipValue",
]
