"""In-memory symbol model over a tree of TypeDecl."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from assistcheck.domain.model.elements import Element, ExecutableDecl, TypeDecl


class InMemorySymbolModel:
    """SymbolModel over top-level type declarations.

    Indexes every type (nested ones included) and every constructor and
    method once at construction. Immutable afterwards.

    Iteration order is declaration order: depth-first over the given
    top-level types, a type before its members and nested types.
    """

    def __init__(self, top_level: Iterable[TypeDecl] = ()) -> None:
        self._top_level: tuple[TypeDecl, ...] = tuple(top_level)
        self._types: list[TypeDecl] = []
        self._owner: dict[TypeDecl | ExecutableDecl, TypeDecl] = {}
        self._marked: list[TypeDecl | ExecutableDecl] = []

        names: set[str] = set()
        for type_decl in self._top_level:
            if type_decl.enclosing is not None:
                raise ValueError(f"'{type_decl.qualified_name}' is nested, expected top-level type")
            self._index(type_decl, names)

    def _index(self, type_decl: TypeDecl, names: set[str]) -> None:
        # FAIL-FIRST: qualified names identify types
        if type_decl.qualified_name in names:
            raise ValueError(f"duplicate type '{type_decl.qualified_name}'")
        names.add(type_decl.qualified_name)

        self._types.append(type_decl)
        self._marked.append(type_decl)
        for executable in (*type_decl.constructors, *type_decl.methods):
            self._owner[executable] = type_decl
            self._marked.append(executable)
        for nested in type_decl.nested_types:
            self._owner[nested] = type_decl
            self._index(nested, names)

    @property
    def top_level(self) -> tuple[TypeDecl, ...]:
        return self._top_level

    def types(self) -> tuple[TypeDecl, ...]:
        return tuple(self._types)

    def elements_marked_with(self, marker: str) -> tuple[TypeDecl | ExecutableDecl, ...]:
        return tuple(element for element in self._marked if marker in element.markers)

    def enclosing_type(self, element: TypeDecl | ExecutableDecl) -> TypeDecl | None:
        return self._owner.get(element)

    def enclosed_elements(self, type_decl: TypeDecl) -> tuple[Element, ...]:
        return (*type_decl.constructors, *type_decl.methods, *type_decl.nested_types)

    def __len__(self) -> int:
        """Number of types, nested ones included."""
        return len(self._types)
