"""Diagnostic sink protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from assistcheck.domain.model.diagnostic import Diagnostic


class DiagnosticSink(Protocol):
    """Receives diagnostics as the pipeline produces them.

    Implementations shared between threads must serialize report() calls.
    """

    def report(self, diagnostic: Diagnostic) -> None:
        """Accept one diagnostic."""
        ...
