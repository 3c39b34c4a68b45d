"""Code emitter protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from assistcheck.domain.model.injection_request import InjectionRequest


class CodeEmitterPort(Protocol):
    """Turns one validated request into generated factory source.

    Called synchronously by the pipeline driver. Any exception it raises
    is reported as an internal error for that candidate only.
    """

    def emit(self, request: InjectionRequest) -> None:
        """Generate and persist the factory implementation for request."""
        ...
