"""Symbol model protocol.

Narrow read-only view of the symbol universe for one processing round.
The pipeline never mutates it, so any implementation (parsed source,
synthetic in-memory graph, cached index) is interchangeable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from assistcheck.domain.model.elements import Element, ExecutableDecl, TypeDecl


class SymbolModel(Protocol):
    """Contract for symbol universes.

    Example:
        class StubModel:
            def types(self) -> tuple[TypeDecl, ...]:
                return (widget,)

            def elements_marked_with(
                self, marker: str
            ) -> tuple[TypeDecl | ExecutableDecl, ...]:
                return ()

            def enclosing_type(
                self, element: TypeDecl | ExecutableDecl
            ) -> TypeDecl | None:
                return None

            def enclosed_elements(self, type_decl: TypeDecl) -> tuple[Element, ...]:
                return ()
    """

    def types(self) -> tuple[TypeDecl, ...]:
        """All declared types, nested ones included, in declaration order."""
        ...

    def elements_marked_with(self, marker: str) -> tuple[TypeDecl | ExecutableDecl, ...]:
        """Types and executables carrying the marker, in declaration order."""
        ...

    def enclosing_type(self, element: TypeDecl | ExecutableDecl) -> TypeDecl | None:
        """Type declaring the element, None at module level."""
        ...

    def enclosed_elements(self, type_decl: TypeDecl) -> tuple[Element, ...]:
        """Constructors, methods and nested types declared in the type body."""
        ...
