"""Domain model entities."""

from assistcheck.domain.model.configuration import ProcessorConfig
from assistcheck.domain.model.diagnostic import Diagnostic
from assistcheck.domain.model.elements import (
    UNTYPED,
    Element,
    ExecutableDecl,
    TypeDecl,
    VariableDecl,
)
from assistcheck.domain.model.enums import (
    ExecutableKind,
    FailureKind,
    ParameterKind,
    Severity,
    TypeKind,
    Visibility,
)
from assistcheck.domain.model.failure import ValidationFailure
from assistcheck.domain.model.generated import GeneratedSource
from assistcheck.domain.model.injection_request import (
    FactoryMethod,
    InjectionRequest,
    ResolvedConstructor,
)
from assistcheck.domain.model.key import Key
from assistcheck.domain.model.location import Location
from assistcheck.domain.model.parameter import Parameter

__all__ = [
    # Enums
    "Visibility",
    "Severity",
    "TypeKind",
    "ExecutableKind",
    "ParameterKind",
    "FailureKind",
    # Value objects
    "Location",
    "Key",
    "Parameter",
    "Diagnostic",
    "ValidationFailure",
    "GeneratedSource",
    # Symbols
    "UNTYPED",
    "Element",
    "TypeDecl",
    "ExecutableDecl",
    "VariableDecl",
    # Resolution
    "ResolvedConstructor",
    "FactoryMethod",
    "InjectionRequest",
    # Configuration
    "ProcessorConfig",
]
