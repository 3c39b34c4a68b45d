"""Domain ports (protocols)."""

from assistcheck.domain.ports.code_emitter import CodeEmitterPort
from assistcheck.domain.ports.diagnostic_sink import DiagnosticSink
from assistcheck.domain.ports.source_writer import SourceWriterPort
from assistcheck.domain.ports.symbol_model import SymbolModel

__all__ = [
    "CodeEmitterPort",
    "DiagnosticSink",
    "SourceWriterPort",
    "SymbolModel",
]
