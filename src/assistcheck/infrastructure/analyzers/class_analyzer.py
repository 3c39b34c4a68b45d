"""Class analyzer."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from assistcheck.domain.model.elements import TypeDecl
from assistcheck.domain.model.enums import ExecutableKind, TypeKind
from assistcheck.infrastructure.analyzers.base import (
    decorator_names,
    extract_base_names,
    get_visibility,
    make_location,
    marker_name,
)
from assistcheck.infrastructure.analyzers.function_analyzer import FunctionAnalyzer

if TYPE_CHECKING:
    from pathlib import Path

    from assistcheck.domain.model.configuration import ProcessorConfig
    from assistcheck.domain.model.elements import ExecutableDecl

INTERFACE_BASES = frozenset({"Protocol", "ABC"})
INTERFACE_METACLASSES = frozenset({"ABCMeta"})
# Accessors are attributes, not methods: never factory method candidates
ACCESSOR_DECORATORS = frozenset({"property", "cached_property", "setter", "getter", "deleter"})


class ClassAnalyzer:
    """Extracts type declarations (with nested types) from Python AST.

    Stateless analyzer - no state between analyze() calls.
    """

    def __init__(self, config: ProcessorConfig) -> None:
        self._function_analyzer = FunctionAnalyzer(config)

    def analyze(
        self,
        node: ast.ClassDef,
        path: Path,
        module_name: str,
        enclosing: str | None = None,
    ) -> TypeDecl:
        """Analyze class AST node.

        Args:
            node: ClassDef AST node
            path: Source file path
            module_name: Fully qualified module name
            enclosing: Qualified name of the enclosing class, None at module level

        Returns:
            TypeDecl including nested classes

        Raises:
            TypeError: If required parameters are None (FAIL-FIRST)
            ValueError: If module_name is empty (FAIL-FIRST)
        """
        if node is None:
            raise TypeError("node must not be None")
        if path is None:
            raise TypeError("path must not be None")
        if not module_name:
            raise ValueError("module_name must be non-empty string")

        qualified_name = f"{enclosing or module_name}.{node.name}"
        is_interface = self._is_interface(node)

        constructors: list[ExecutableDecl] = []
        methods: list[ExecutableDecl] = []
        nested: list[TypeDecl] = []

        for item in node.body:
            match item:
                case ast.FunctionDef() | ast.AsyncFunctionDef():
                    if decorator_names(item.decorator_list) & ACCESSOR_DECORATORS:
                        continue
                    executable = self._function_analyzer.analyze(
                        item, path, qualified_name, in_interface=is_interface
                    )
                    if executable.kind is ExecutableKind.CONSTRUCTOR:
                        constructors.append(executable)
                    else:
                        methods.append(executable)
                case ast.ClassDef():
                    nested.append(self.analyze(item, path, module_name, qualified_name))

        return TypeDecl(
            name=node.name,
            qualified_name=qualified_name,
            module=module_name,
            kind=TypeKind.INTERFACE if is_interface else TypeKind.CLASS,
            visibility=get_visibility(node.name),
            enclosing=enclosing,
            # No instance-bound inner classes in Python
            is_static=True,
            bases=extract_base_names(node),
            markers=decorator_names(node.decorator_list),
            constructors=tuple(constructors),
            methods=tuple(methods),
            nested_types=tuple(nested),
            location=make_location(node, path),
        )

    def _is_interface(self, node: ast.ClassDef) -> bool:
        """Check if class is a pure contract.

        A class is an interface if it inherits from Protocol or ABC
        (generic forms such as Protocol[T] included), or uses ABCMeta.
        """
        for base in node.bases:
            match base:
                case ast.Subscript(value=value):
                    name = marker_name(value)
                case _:
                    name = marker_name(base)
            if name in INTERFACE_BASES:
                return True

        for keyword in node.keywords:
            if keyword.arg == "metaclass" and marker_name(keyword.value) in INTERFACE_METACLASSES:
                return True

        return False
