"""Infrastructure adapters."""

from assistcheck.infrastructure.adapters.ast_symbols import AstSymbolSource

__all__ = ["AstSymbolSource"]
