"""Console reporter: round result -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from assistcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from assistcheck.application.services.processor import RoundResult
    from assistcheck.domain.model.diagnostic import Diagnostic


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_requests: List generated factories.
        width: Console width in columns.
        force_terminal: Emit ANSI styles even when not writing to a tty.
    """

    show_requests: bool = True
    width: int = 120
    force_terminal: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        self._config = config or ConsoleConfig()

    def report(self, result: RoundResult, diagnostics: tuple[Diagnostic, ...]) -> str:
        """Format round result as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        self._render_header(console, result, diagnostics)
        if self._config.show_requests and result.emitted:
            self._render_generated(console, result)
        if diagnostics:
            self._render_errors(console, diagnostics)

        return output.getvalue()

    def _render_header(
        self,
        console: Console,
        result: RoundResult,
        diagnostics: tuple[Diagnostic, ...],
    ) -> None:
        console.print()
        console.rule("[bold]ASSISTED INJECTION[/bold]")
        console.print()
        status = "[green]PASSED[/green]" if not diagnostics else "[red]FAILED[/red]"
        console.print(
            f"[bold]Candidates:[/bold] {len(result.candidates)}  "
            f"[bold]Generated:[/bold] {len(result.emitted)}  "
            f"[bold]Errors:[/bold] {len(diagnostics)}  {status}"
        )
        console.print()

    def _render_generated(self, console: Console, result: RoundResult) -> None:
        table = Table(title="Generated factories")
        table.add_column("Target")
        table.add_column("Factory")
        table.add_column("Assisted")
        table.add_column("Provided")

        emitted = set(result.emitted)
        for request in result.requests:
            if request.target_type.qualified_name not in emitted:
                continue
            table.add_row(
                request.target_type.qualified_name,
                f"{request.factory_interface.name}.{request.factory_method.name}",
                ", ".join(str(p.key) for p in request.assisted_parameters),
                ", ".join(str(p.key) for p in request.provided_parameters),
            )

        console.print(table)
        console.print()

    def _render_errors(self, console: Console, diagnostics: tuple[Diagnostic, ...]) -> None:
        console.print(f"[bold red]ERRORS[/bold red] ({len(diagnostics)})")
        console.print()

        for diagnostic in diagnostics:
            where = diagnostic.location or diagnostic.subject or "<unknown>"
            console.print(f"[yellow]{escape(str(where))}[/yellow]")
            for line in diagnostic.message.splitlines():
                console.print(f"  {escape(line)}")
            console.print()
