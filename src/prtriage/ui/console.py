"""Rich-powered diagnostic output for the triage bot."""

from __future__ import annotations

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.table import Table

from prtriage.models import OutcomeStatus, TriageReport

_STATUS_STYLE = {
    OutcomeStatus.APPLIED: "green",
    OutcomeStatus.SKIPPED: "dim",
    OutcomeStatus.FAILED: "red",
}


class Console:
    """Terminal diagnostics, written to stderr.

    Messages are escaped, so titles like ``feat[api]: x`` print verbatim.
    """

    def __init__(self, console: RichConsole | None = None) -> None:
        self.console = console or RichConsole(stderr=True)

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/yellow] {escape(message)}")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]i[/blue] {escape(message)}")

    def show_report(self, report: TriageReport) -> None:
        """Summarize rule outcomes in a table."""
        table = Table(title=f"PR #{report.pr_number} triage", border_style="cyan")
        table.add_column("Rule", style="bold")
        table.add_column("Status")
        table.add_column("Detail")

        for outcome in report.outcomes:
            style = _STATUS_STYLE.get(outcome.status, "")
            table.add_row(
                outcome.rule,
                f"[{style}]{outcome.status.value}[/{style}]",
                escape(outcome.detail),
            )

        self.console.print(table)
