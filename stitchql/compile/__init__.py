"""stitchQL compilation layer: template + arguments → SQL text."""
from stitchql.compile.base import TemplateCompiler
from stitchql.compile.builder import TemplateBuilder
from stitchql.compile.conditional import ConditionalResolver, resolve_conditionals
from stitchql.compile.formatters import ArrayFormatter, IdentifierFormatter, ValueFormatter
from stitchql.compile.lexer import tokenize
from stitchql.compile.mysql import MySQLTemplateCompiler
from stitchql.compile.postgres import PostgresTemplateCompiler
from stitchql.compile.sqlite import SQLiteTemplateCompiler

__all__ = [
    "TemplateCompiler",
    "TemplateBuilder",
    "ConditionalResolver",
    "resolve_conditionals",
    "ValueFormatter",
    "ArrayFormatter",
    "IdentifierFormatter",
    "tokenize",
    "MySQLTemplateCompiler",
    "PostgresTemplateCompiler",
    "SQLiteTemplateCompiler",
]
