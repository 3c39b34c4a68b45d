"""Plain text reporter using print().

Stdlib-only reporter for build logs and CI output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from assistcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from assistcheck.application.services.processor import RoundResult
    from assistcheck.domain.model.diagnostic import Diagnostic


class PlainTextReporter(BaseReporter):
    """Writes one `location: error: message` block per diagnostic.

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: RoundResult, diagnostics: tuple[Diagnostic, ...]) -> None:
        for diagnostic in diagnostics:
            self._write(str(diagnostic))

        self._write(
            f"{len(result.candidates)} candidate(s), "
            f"{len(result.emitted)} factory(ies) generated, "
            f"{len(diagnostics)} error(s)"
        )

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
