"""Application services."""

from assistcheck.application.services.processor import (
    AssistedInjectProcessor,
    RoundResult,
    RoundState,
)

__all__ = [
    "AssistedInjectProcessor",
    "RoundResult",
    "RoundState",
]
