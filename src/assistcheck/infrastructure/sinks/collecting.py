"""Collecting diagnostic sink."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from assistcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from assistcheck.domain.model.diagnostic import Diagnostic


class CollectingSink:
    """Keeps every reported diagnostic in report order.

    Thread-safe: report() is serialized so parallel validators may share
    one sink.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        with self._lock:
            self._diagnostics.append(diagnostic)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        with self._lock:
            return tuple(self._diagnostics)

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity is Severity.ERROR)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def clear(self) -> None:
        """Forget collected diagnostics (start of a new round)."""
        with self._lock:
            self._diagnostics.clear()
