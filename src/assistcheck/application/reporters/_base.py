"""Base reporter class for round output formatting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from assistcheck.application.services.processor import RoundResult
    from assistcheck.domain.model.diagnostic import Diagnostic


class BaseReporter(ABC):
    """Base class for reporters.

    assistcheck provides PlainTextReporter and ConsoleReporter.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result, diagnostics):
                return f"{len(diagnostics)} error(s)"
    """

    @abstractmethod
    def report(self, result: RoundResult, diagnostics: tuple[Diagnostic, ...]) -> str | None:
        """Report one round.

        Args:
            result: Round outcome (candidates, requests, emitted)
            diagnostics: Everything reported to the sink during the round

        Returns:
            Rendered text for reporters that do not write themselves
        """
