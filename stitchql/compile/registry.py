"""Template compiler registry.

``CompilerFactory`` maps dialect target names to
:class:`~stitchql.compile.base.TemplateCompiler` classes so a new dialect can
be added without editing the driver.

Usage::

    from stitchql.compile.registry import CompilerFactory

    @CompilerFactory.register("mssql")
    class MSSQLTemplateCompiler(TemplateCompiler):
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from stitchql.compile.base import TemplateCompiler
from stitchql.compile.escaping import Escaper
from stitchql.errors import CompilationError


class CompilerFactory:
    """Registry mapping dialect target names to :class:`TemplateCompiler` classes.

    Example::

        @CompilerFactory.register("mssql")
        class MSSQLTemplateCompiler(TemplateCompiler):
            ...

        compiler = CompilerFactory.create("mssql")
    """

    _compilers: ClassVar[dict[str, type[TemplateCompiler]]] = {}

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[type[TemplateCompiler]], type[TemplateCompiler]]:
        """Decorator that registers a compiler class under ``name``.

        Args:
            name: The dialect target name (e.g. ``"mysql"``).

        Returns:
            A decorator that registers and returns the compiler class.
        """

        def decorator(compiler_cls: type[TemplateCompiler]) -> type[TemplateCompiler]:
            cls._compilers[name] = compiler_cls
            return compiler_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, compiler_cls: type[TemplateCompiler]) -> None:
        """Register a compiler class without using the decorator form."""
        cls._compilers[name] = compiler_cls

    @classmethod
    def create(cls, name: str, escape: Escaper | None = None) -> TemplateCompiler:
        """Instantiate the compiler registered for ``name``.

        Args:
            name: The dialect target name.
            escape: Optional escaping collaborator passed to the compiler.

        Returns:
            A fresh :class:`TemplateCompiler` instance.

        Raises:
            CompilationError: If no compiler is registered for ``name``.
        """
        compiler_cls = cls._compilers.get(name)
        if compiler_cls is None:
            registered = sorted(cls._compilers)
            raise CompilationError(
                f"Unsupported dialect target: '{name}'. Registered targets: {registered}.",
                target=name,
            )
        return compiler_cls(escape=escape)

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect target names."""
        return sorted(cls._compilers)
