"""Symbol declarations: the read-only snapshot the pipeline validates.

Three element shapes make up the symbol universe:

- TypeDecl: a class (or interface) with its constructors, methods and
  nested types
- ExecutableDecl: a constructor or method declared in a type body
- VariableDecl: a formal parameter of an executable

All are frozen. A round builds them once and never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from assistcheck.domain.model.enums import (
    ExecutableKind,
    ParameterKind,
    TypeKind,
    Visibility,
)
from assistcheck.domain.model.location import Location

# Declared type used for parameters without an annotation
UNTYPED = "Any"


@dataclass(frozen=True, slots=True)
class VariableDecl:
    """Formal parameter of a constructor or method.

    Attributes:
        name: Parameter name
        type: Declared type as source text (without Annotated metadata)
        markers: Marker names attached to the parameter (e.g. "Assisted")
        qualifiers: Qualifier markers as source text (e.g. 'Named("primary")')
        kind: Binding kind (positional, keyword-only, variadic)
        location: Source location, None for synthetic symbols
    """

    name: str
    type: str = UNTYPED
    markers: frozenset[str] = frozenset()
    qualifiers: tuple[str, ...] = ()
    kind: ParameterKind = ParameterKind.POSITIONAL_OR_KEYWORD
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")
        if not self.type:
            raise ValueError(f"parameter '{self.name}' type must not be empty")
        for qualifier in self.qualifiers:
            if not qualifier:
                raise ValueError(f"parameter '{self.name}' qualifier must not be empty")


@dataclass(frozen=True, slots=True)
class ExecutableDecl:
    """Constructor or method declared in a type body.

    Attributes:
        name: Simple name (__init__ for constructors)
        qualified_name: Full path (module.Type.name)
        kind: CONSTRUCTOR or METHOD
        parameters: Formal parameters, receiver (self/cls) excluded
        return_type: Return annotation as source text, None if untyped
        markers: Marker names from decorators
        visibility: PUBLIC/PROTECTED/PRIVATE
        is_static: staticmethod or classmethod (no instance receiver)
        is_default: Has a concrete body inside an interface
        location: Source location, None for synthetic symbols
    """

    name: str
    qualified_name: str
    kind: ExecutableKind
    parameters: tuple[VariableDecl, ...] = ()
    return_type: str | None = None
    markers: frozenset[str] = frozenset()
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    is_default: bool = False
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("executable name must not be empty")

        if not self.qualified_name.endswith(f".{self.name}"):
            raise ValueError(
                f"qualified_name '{self.qualified_name}' must end with name '{self.name}'"
            )

        if self.kind is ExecutableKind.CONSTRUCTOR and self.is_static:
            raise ValueError("constructor cannot be static")

        names = [p.name for p in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"'{self.qualified_name}' has duplicate parameter names")

    @property
    def is_private(self) -> bool:
        """Name-mangled (__name) declaration."""
        return self.visibility is Visibility.PRIVATE


@dataclass(frozen=True, slots=True)
class TypeDecl:
    """Class or interface declaration.

    Attributes:
        name: Simple class name
        qualified_name: Full path (module.Outer.Name)
        module: Module that declares the type
        kind: CLASS or INTERFACE
        visibility: PUBLIC/PROTECTED/PRIVATE
        enclosing: Qualified name of enclosing type, None at module level
        is_static: False only for instance-bound inner types
        bases: Base class names as written in source
        markers: Marker names from class decorators
        constructors: Declared constructors
        methods: Declared methods (properties excluded)
        nested_types: Types declared in the class body
        location: Source location, None for synthetic symbols

    Python has no instance-bound inner classes: parsed source always
    yields is_static=True. Synthetic models may set it to False.
    """

    name: str
    qualified_name: str
    module: str
    kind: TypeKind = TypeKind.CLASS
    visibility: Visibility = Visibility.PUBLIC
    enclosing: str | None = None
    is_static: bool = True
    bases: tuple[str, ...] = ()
    markers: frozenset[str] = frozenset()
    constructors: tuple[ExecutableDecl, ...] = ()
    methods: tuple[ExecutableDecl, ...] = ()
    nested_types: tuple[TypeDecl, ...] = ()
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("type name must not be empty")

        if not self.module:
            raise ValueError("module must not be empty")

        if not self.qualified_name.startswith(f"{self.module}."):
            raise ValueError(
                f"qualified_name '{self.qualified_name}' must start with module '{self.module}'"
            )

        if not self.qualified_name.endswith(f".{self.name}"):
            raise ValueError(
                f"qualified_name '{self.qualified_name}' must end with name '{self.name}'"
            )

        for ctor in self.constructors:
            if ctor.kind is not ExecutableKind.CONSTRUCTOR:
                raise ValueError(f"'{ctor.qualified_name}' is not a constructor")

        for method in self.methods:
            if method.kind is not ExecutableKind.METHOD:
                raise ValueError(f"'{method.qualified_name}' is not a method")

        for nested in self.nested_types:
            if nested.enclosing != self.qualified_name:
                raise ValueError(
                    f"nested type '{nested.qualified_name}' must have "
                    f"enclosing='{self.qualified_name}', got {nested.enclosing!r}"
                )

    @property
    def is_private(self) -> bool:
        """Name-mangled (__Name) declaration."""
        return self.visibility is Visibility.PRIVATE

    @property
    def is_nested(self) -> bool:
        """Declared inside another type."""
        return self.enclosing is not None

    @property
    def local_name(self) -> str:
        """Dotted path inside the declaring module (Outer.Name)."""
        return self.qualified_name[len(self.module) + 1 :]


Element: TypeAlias = TypeDecl | ExecutableDecl | VariableDecl
