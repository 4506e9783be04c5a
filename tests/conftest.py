"""Shared pytest fixtures for stitchQL unit and integration tests."""
from __future__ import annotations

import pytest

from stitchql import TemplateBuilder
from stitchql.compile.context import CompilationContext
from stitchql.compile.formatters import ValueFormatter
from stitchql.compile.mysql import MySQLTemplateCompiler
from stitchql.compile.postgres import PostgresTemplateCompiler
from stitchql.compile.sqlite import SQLiteTemplateCompiler
from stitchql.schema.profile import TemplateProfile


@pytest.fixture(scope="session")
def mysql_builder() -> TemplateBuilder:
    """Default MySQL builder, lenient argument count."""
    return TemplateBuilder(MySQLTemplateCompiler())


@pytest.fixture(scope="session")
def strict_builder() -> TemplateBuilder:
    return TemplateBuilder(
        MySQLTemplateCompiler(),
        TemplateProfile.builder("mysql").strict().build(),
    )


@pytest.fixture(scope="session")
def postgres_builder() -> TemplateBuilder:
    return TemplateBuilder(PostgresTemplateCompiler())


@pytest.fixture(scope="session")
def sqlite_builder() -> TemplateBuilder:
    return TemplateBuilder(SQLiteTemplateCompiler())


@pytest.fixture(scope="session")
def mysql_formatter() -> ValueFormatter:
    """Value formatter bound to MySQL with the default profile."""
    return ValueFormatter(
        CompilationContext(compiler=MySQLTemplateCompiler(), profile=TemplateProfile())
    )
