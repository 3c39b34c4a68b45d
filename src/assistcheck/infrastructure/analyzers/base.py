"""Base utilities for AST analyzers."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from assistcheck.domain.exceptions.parsing import ParsingError
from assistcheck.domain.model.enums import Visibility
from assistcheck.domain.model.location import Location

if TYPE_CHECKING:
    from pathlib import Path


def make_location(node: ast.stmt | ast.expr | ast.arg, path: Path) -> Location:
    """Create Location from AST node.

    Args:
        node: AST node with position info
        path: Source file path

    Returns:
        Location pointing to node

    Raises:
        ParsingError: If node has no line info (FAIL-FIRST)
    """
    lineno = getattr(node, "lineno", None)
    if lineno is None:
        raise ParsingError(path, f"{type(node).__name__} node has no line info")

    return Location(file=path, line=lineno, column=node.col_offset)


def get_visibility(name: str) -> Visibility:
    """Determine visibility from Python naming convention.

    Rules:
        __name__ (dunder) → PUBLIC (special methods)
        __name (not __name__) → PRIVATE (mangled)
        _name → PROTECTED
        name → PUBLIC
    """
    if name.startswith("__") and name.endswith("__"):
        return Visibility.PUBLIC
    if name.startswith("__"):
        return Visibility.PRIVATE
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def compute_module_name(file_path: Path, root_path: Path) -> str:
    """Compute fully qualified module name from file path.

    Args:
        file_path: Path to .py file
        root_path: Directory module names are relative to

    Returns:
        Fully qualified module name

    Raises:
        ParsingError: If path is invalid (FAIL-FIRST)
    """
    try:
        relative = file_path.relative_to(root_path)
    except ValueError as e:
        raise ParsingError(file_path, f"not under {root_path}") from e

    parts = list(relative.with_suffix("").parts)

    if parts and parts[-1] == "__init__":
        parts = parts[:-1]

    for part in parts:
        if not part.isidentifier():
            raise ParsingError(file_path, f"'{part}' is not valid Python identifier")

    if not parts:
        raise ParsingError(file_path, "cannot determine module name (empty)")

    return ".".join(parts)


def marker_name(node: ast.expr) -> str | None:
    """Bare name of a decorator or Annotated metadata entry.

    Matches on the last dotted segment, calls unwrapped:

        Assisted                  → "Assisted"
        assistcheck.Assisted      → "Assisted"
        markers.Named("primary")  → "Named"

    Returns:
        Name, or None for expressions that are not names (literals, lambdas)
    """
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(attr=name):
            return name
        case ast.Call(func=func):
            return marker_name(func)
    return None


def decorator_names(decorators: list[ast.expr]) -> frozenset[str]:
    """Bare names of all decorators in a decorator list."""
    return frozenset(name for dec in decorators if (name := marker_name(dec)) is not None)


def extract_base_names(class_node: ast.ClassDef) -> tuple[str, ...]:
    """Base class names as they appear in code."""
    return tuple(ast.unparse(base) for base in class_node.bases)
