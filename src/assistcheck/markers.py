"""Markers imported by application code.

All markers are inert at runtime: they only label declarations for the
static checker. Nothing here wires objects together.

Example:
    from typing import Annotated, Protocol

    from assistcheck.markers import Assisted, Named, assisted_factory, assisted_inject

    class Widget:
        @assisted_inject
        def __init__(self, id: Annotated[int, Assisted], logger: Logger) -> None: ...

        @assisted_factory
        class Factory(Protocol):
            def create(self, id: int) -> "Widget": ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, TypeVar

F = TypeVar("F")
C = TypeVar("C")


def assisted_inject(func: F) -> F:
    """Mark the constructor whose parameters mix assisted and provided values."""
    return func


def assisted_factory(cls: C) -> C:
    """Mark the nested factory interface that creates the enclosing type."""
    return cls


class _AssistedMarker:
    """Singleton placed in Annotated metadata of assisted parameters."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Assisted"


Assisted: Final = _AssistedMarker()


@dataclass(frozen=True, slots=True)
class Named:
    """Qualifier distinguishing parameters of the same type.

    Attributes:
        value: Qualifier name
    """

    value: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.value:
            raise ValueError("qualifier value must not be empty")


__all__ = ["Assisted", "Named", "assisted_factory", "assisted_inject"]
