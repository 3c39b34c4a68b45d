"""Resolved injection request and its parts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from assistcheck.domain.model.enums import ExecutableKind, TypeKind

if TYPE_CHECKING:
    from assistcheck.domain.model.elements import ExecutableDecl, TypeDecl
    from assistcheck.domain.model.key import Key
    from assistcheck.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class ResolvedConstructor:
    """The single eligible constructor with its classified parameters.

    Attributes:
        declaration: Constructor declaration
        parameters: Classified parameters in declaration order
    """

    declaration: ExecutableDecl
    parameters: tuple[Parameter, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.declaration.kind is not ExecutableKind.CONSTRUCTOR:
            raise ValueError(f"'{self.declaration.qualified_name}' is not a constructor")
        if len(self.parameters) != len(self.declaration.parameters):
            raise ValueError("every declared parameter must be classified exactly once")

    @property
    def assisted(self) -> tuple[Parameter, ...]:
        """Parameters supplied by the factory caller."""
        return tuple(p for p in self.parameters if p.is_assisted)

    @property
    def provided(self) -> tuple[Parameter, ...]:
        """Parameters supplied by the container."""
        return tuple(p for p in self.parameters if not p.is_assisted)


@dataclass(frozen=True, slots=True)
class FactoryMethod:
    """The single abstract method of a factory interface.

    Attributes:
        declaration: Method declaration
        parameters: Classified parameters in declaration order
    """

    declaration: ExecutableDecl
    parameters: tuple[Parameter, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.declaration.kind is not ExecutableKind.METHOD:
            raise ValueError(f"'{self.declaration.qualified_name}' is not a method")
        if len(self.parameters) != len(self.declaration.parameters):
            raise ValueError("every declared parameter must be classified exactly once")

    @property
    def name(self) -> str:
        return self.declaration.name

    @property
    def return_type(self) -> str | None:
        return self.declaration.return_type

    @property
    def keys(self) -> tuple[Key, ...]:
        """Parameter keys in declaration order."""
        return tuple(p.key for p in self.parameters)


@dataclass(frozen=True, slots=True)
class InjectionRequest:
    """Fully validated wiring between a target type and its factory.

    Sole artifact handed to code emission. Never mutated once built.

    Attributes:
        target_type: Type whose constructor is assisted
        constructor: Its single eligible constructor
        factory_interface: Nested factory interface
        factory_method: Single abstract method of the factory
        all_parameters: Constructor parameters in declaration order
    """

    target_type: TypeDecl
    constructor: ResolvedConstructor
    factory_interface: TypeDecl
    factory_method: FactoryMethod
    all_parameters: tuple[Parameter, ...]

    def __post_init__(self) -> None:
        """Validate structural invariants. FAIL-FIRST."""
        if self.factory_interface.kind is not TypeKind.INTERFACE:
            raise ValueError(f"'{self.factory_interface.qualified_name}' is not an interface")
        if self.factory_interface.enclosing != self.target_type.qualified_name:
            raise ValueError(
                f"factory '{self.factory_interface.qualified_name}' must be nested in "
                f"'{self.target_type.qualified_name}'"
            )
        if self.all_parameters != self.constructor.parameters:
            raise ValueError("all_parameters must match the constructor parameters")

    @property
    def assisted_parameters(self) -> tuple[Parameter, ...]:
        return self.constructor.assisted

    @property
    def provided_parameters(self) -> tuple[Parameter, ...]:
        return self.constructor.provided

    @property
    def factory_parameters(self) -> tuple[Parameter, ...]:
        return self.factory_method.parameters
