"""Tests for application/reporters/."""

from io import StringIO

import pytest

from assistcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from assistcheck.application.reporters.plain_text import PlainTextReporter
from assistcheck.application.services.processor import AssistedInjectProcessor, RoundResult
from assistcheck.domain.model.diagnostic import Diagnostic
from assistcheck.domain.model.enums import Severity
from assistcheck.infrastructure.sinks.collecting import CollectingSink
from tests.factories import make_model, make_widget


class _NullEmitter:
    def emit(self, request) -> None:
        pass


def _round(*types):
    sink = CollectingSink()
    result = AssistedInjectProcessor(sink, _NullEmitter()).run_round(make_model(*types))
    return result, sink.diagnostics


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_summary_only_when_clean(self) -> None:
        output = StringIO()
        result, diagnostics = _round(make_widget())
        PlainTextReporter(output).report(result, diagnostics)

        assert output.getvalue() == "1 candidate(s), 1 factory(ies) generated, 0 error(s)\n"

    def test_one_line_per_diagnostic(self) -> None:
        output = StringIO()
        result, diagnostics = _round(make_widget("A", factory_params=()), make_widget("B"))
        PlainTextReporter(output).report(result, diagnostics)

        lines = output.getvalue().splitlines()
        assert lines[0].startswith("/test/widgets.py:5:0: error: Factory method parameters")
        assert lines[-1] == "2 candidate(s), 1 factory(ies) generated, 1 error(s)"

    def test_report_returns_none(self) -> None:
        assert PlainTextReporter(StringIO()).report(RoundResult(), ()) is None


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    PLAIN = ConsoleConfig(force_terminal=False)

    def test_passed(self) -> None:
        result, diagnostics = _round(make_widget())
        text = ConsoleReporter(self.PLAIN).report(result, diagnostics)

        assert "ASSISTED INJECTION" in text
        assert "PASSED" in text
        assert "Generated factories" in text
        assert "app.widgets.Widget" in text

    def test_failed_lists_errors(self) -> None:
        result, diagnostics = _round(make_widget(factory_params=()))
        text = ConsoleReporter(self.PLAIN).report(result, diagnostics)

        assert "FAILED" in text
        assert "ERRORS" in text
        assert "Missing:" in text
        assert "Generated factories" not in text

    def test_markup_in_messages_is_escaped(self) -> None:
        diagnostic = Diagnostic(Severity.ERROR, "bad [bold]x[/bold]", subject="app.W")
        text = ConsoleReporter(self.PLAIN).report(RoundResult(), (diagnostic,))
        assert "bad [bold]x[/bold]" in text

    def test_requests_hidden_when_disabled(self) -> None:
        result, diagnostics = _round(make_widget())
        config = ConsoleConfig(show_requests=False, force_terminal=False)
        assert "Generated factories" not in ConsoleReporter(config).report(result, diagnostics)

    def test_no_candidates(self) -> None:
        text = ConsoleReporter(self.PLAIN).report(RoundResult(), ())
        assert "Candidates:" in text

    def test_invalid_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be > 0"):
            ConsoleConfig(width=0)
