"""Symbol model implementations."""

from assistcheck.infrastructure.symbols.in_memory import InMemorySymbolModel

__all__ = ["InMemorySymbolModel"]
