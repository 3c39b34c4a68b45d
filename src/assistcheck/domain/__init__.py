"""assistcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib
"""

from assistcheck.domain.exceptions import (
    AssistCheckError,
    ConfigurationError,
    EmitError,
    ParsingError,
)
from assistcheck.domain.model import (
    Diagnostic,
    ExecutableDecl,
    FactoryMethod,
    FailureKind,
    InjectionRequest,
    Key,
    Location,
    Parameter,
    ProcessorConfig,
    ResolvedConstructor,
    Severity,
    TypeDecl,
    TypeKind,
    ValidationFailure,
    VariableDecl,
    Visibility,
)
from assistcheck.domain.ports import (
    CodeEmitterPort,
    DiagnosticSink,
    SourceWriterPort,
    SymbolModel,
)

__all__ = [
    # Exceptions
    "AssistCheckError",
    "ConfigurationError",
    "EmitError",
    "ParsingError",
    # Enums
    "Visibility",
    "Severity",
    "TypeKind",
    "FailureKind",
    # Value objects
    "Location",
    "Key",
    "Parameter",
    "Diagnostic",
    "ValidationFailure",
    # Symbols
    "TypeDecl",
    "ExecutableDecl",
    "VariableDecl",
    # Resolution
    "ResolvedConstructor",
    "FactoryMethod",
    "InjectionRequest",
    "ProcessorConfig",
    # Ports
    "SymbolModel",
    "DiagnosticSink",
    "CodeEmitterPort",
    "SourceWriterPort",
]
