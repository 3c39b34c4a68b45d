"""Tests for infrastructure/sinks/collecting.py."""

import threading

from assistcheck.domain.model.diagnostic import Diagnostic
from assistcheck.domain.model.enums import Severity
from assistcheck.infrastructure.sinks.collecting import CollectingSink


def _diagnostic(message: str, severity: Severity = Severity.ERROR) -> Diagnostic:
    return Diagnostic(severity, message)


class TestCollectingSink:
    def test_keeps_report_order(self) -> None:
        sink = CollectingSink()
        sink.report(_diagnostic("first"))
        sink.report(_diagnostic("second"))
        assert [d.message for d in sink.diagnostics] == ["first", "second"]

    def test_errors_filter(self) -> None:
        sink = CollectingSink()
        sink.report(_diagnostic("note", Severity.INFO))
        assert sink.has_errors is False
        sink.report(_diagnostic("bad"))
        assert [d.message for d in sink.errors] == ["bad"]
        assert sink.has_errors is True

    def test_clear(self) -> None:
        sink = CollectingSink()
        sink.report(_diagnostic("x"))
        sink.clear()
        assert sink.diagnostics == ()

    def test_concurrent_reports(self) -> None:
        sink = CollectingSink()

        def worker() -> None:
            for _ in range(100):
                sink.report(_diagnostic("x"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(sink.diagnostics) == 800
