"""Constructor/method analyzer."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from assistcheck.domain.model.elements import ExecutableDecl, VariableDecl
from assistcheck.domain.model.enums import ExecutableKind, ParameterKind
from assistcheck.infrastructure.analyzers.annotation_analyzer import AnnotationAnalyzer
from assistcheck.infrastructure.analyzers.base import (
    decorator_names,
    get_visibility,
    make_location,
)

if TYPE_CHECKING:
    from pathlib import Path

    from assistcheck.domain.model.configuration import ProcessorConfig

CONSTRUCTOR_NAME = "__init__"
STATIC_DECORATORS = frozenset({"staticmethod", "classmethod"})


class FunctionAnalyzer:
    """Extracts constructor/method declarations from Python AST.

    Stateless analyzer - no state between analyze() calls.
    """

    def __init__(self, config: ProcessorConfig) -> None:
        self._annotations = AnnotationAnalyzer(config)

    def analyze(
        self,
        node: ast.FunctionDef | ast.AsyncFunctionDef,
        path: Path,
        owner_qualified_name: str,
        in_interface: bool = False,
    ) -> ExecutableDecl:
        """Analyze function AST node declared in a class body.

        Args:
            node: FunctionDef or AsyncFunctionDef AST node
            path: Source file path
            owner_qualified_name: Qualified name of the declaring class
            in_interface: Declaring class is a Protocol/ABC

        Returns:
            ExecutableDecl (receiver parameter excluded)

        Raises:
            TypeError: If required parameters are None (FAIL-FIRST)
            ValueError: If owner_qualified_name is empty (FAIL-FIRST)
        """
        if node is None:
            raise TypeError("node must not be None")
        if path is None:
            raise TypeError("path must not be None")
        if not owner_qualified_name:
            raise ValueError("owner_qualified_name must be non-empty string")

        decorators = decorator_names(node.decorator_list)
        is_static = bool(decorators & STATIC_DECORATORS)
        is_constructor = node.name == CONSTRUCTOR_NAME
        is_abstract = "abstractmethod" in decorators or (in_interface and _is_stub(node))

        return ExecutableDecl(
            name=node.name,
            qualified_name=f"{owner_qualified_name}.{node.name}",
            kind=ExecutableKind.CONSTRUCTOR if is_constructor else ExecutableKind.METHOD,
            parameters=self._extract_parameters(
                node.args, path, has_receiver="staticmethod" not in decorators
            ),
            return_type=ast.unparse(node.returns).strip("'\"") if node.returns else None,
            markers=decorators,
            visibility=get_visibility(node.name),
            is_static=is_static and not is_constructor,
            is_default=in_interface and not is_constructor and not is_abstract,
            location=make_location(node, path),
        )

    def _extract_parameters(
        self,
        args: ast.arguments,
        path: Path,
        has_receiver: bool,
    ) -> tuple[VariableDecl, ...]:
        """Extract parameters in signature order.

        Args:
            args: Function arguments AST node
            path: Source file path
            has_receiver: Drop the first positional parameter (self/cls)

        Returns:
            Tuple of VariableDecl
        """
        positional = [
            *((arg, ParameterKind.POSITIONAL_ONLY) for arg in args.posonlyargs),
            *((arg, ParameterKind.POSITIONAL_OR_KEYWORD) for arg in args.args),
        ]
        if has_receiver and positional:
            positional = positional[1:]

        ordered = list(positional)
        if args.vararg:
            ordered.append((args.vararg, ParameterKind.VAR_POSITIONAL))
        ordered.extend((arg, ParameterKind.KEYWORD_ONLY) for arg in args.kwonlyargs)
        if args.kwarg:
            ordered.append((args.kwarg, ParameterKind.VAR_KEYWORD))

        return tuple(self._make_variable(arg, kind, path) for arg, kind in ordered)

    def _make_variable(self, arg: ast.arg, kind: ParameterKind, path: Path) -> VariableDecl:
        info = self._annotations.analyze(arg.annotation)
        return VariableDecl(
            name=arg.arg,
            type=info.type,
            markers=info.markers,
            qualifiers=info.qualifiers,
            kind=kind,
            location=make_location(arg, path),
        )


def _is_stub(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    """Body is only a docstring, `...`, `pass` or `raise NotImplementedError`."""
    for statement in node.body:
        match statement:
            case ast.Expr(value=ast.Constant(value=str())):
                continue
            case ast.Expr(value=ast.Constant(value=value)) if value is Ellipsis:
                continue
            case ast.Pass():
                continue
            case ast.Raise(exc=ast.Name(id="NotImplementedError")):
                continue
            case ast.Raise(exc=ast.Call(func=ast.Name(id="NotImplementedError"))):
                continue
        return False
    return True
