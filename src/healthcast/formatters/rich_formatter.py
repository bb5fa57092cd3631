"""Rich terminal formatter for healthcast."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .. import calibration as cal
from ..rules.models import Level, Severity
from ..scoring import Report
from ..triviality import StubAudit
from .base import BaseFormatter

_SEVERITY_STYLE = {
    Severity.CRITICAL: "[red bold]critical[/red bold]",
    Severity.HIGH: "[red]high[/red]",
    Severity.MEDIUM: "[yellow]medium[/yellow]",
    Severity.LOW: "[green]low[/green]",
}

_LEVEL_STYLE = {
    Level.HIGH: "[bold]high[/bold]",
    Level.MEDIUM: "medium",
    Level.LOW: "[dim]low[/dim]",
}


def _score_style(score: int) -> str:
    if score >= cal.TREND_EXCELLENT_MIN:
        return "green"
    elif score >= cal.TREND_GOOD_MIN:
        return "cyan"
    elif score >= cal.TREND_IMPROVING_MIN:
        return "yellow"
    else:
        return "red"


class RichFormatter(BaseFormatter):
    """Rich terminal output with a summary panel and detail tables."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def render_report(self, report: Report) -> None:
        style = _score_style(report.score)
        self.console.print(
            Panel(
                f"[bold {style}]{report.score}/100[/bold {style}]  ({escape(report.trend)})\n\n{escape(report.summary)}",
                title="[bold cyan]Codebase Health[/bold cyan]",
                expand=False,
            )
        )

        if report.issues:
            table = Table(title="Predicted issues", show_lines=False)
            table.add_column("Type")
            table.add_column("Severity")
            table.add_column("Confidence", justify="right")
            table.add_column("Issue")
            table.add_column("Suggested action")
            for issue in report.issues:
                table.add_row(
                    issue.type.value,
                    _SEVERITY_STYLE[issue.severity],
                    f"{issue.confidence}%",
                    escape(issue.message),
                    escape(issue.suggested_action),
                )
            self.console.print(table)
        else:
            self.console.print("[green]No issues predicted.[/green]")

        if report.optimizations:
            table = Table(title="Optimizations", show_lines=False)
            table.add_column("Type")
            table.add_column("Impact")
            table.add_column("Effort")
            table.add_column("Suggestion")
            for opt in report.optimizations:
                table.add_row(
                    opt.type.value,
                    _LEVEL_STYLE[opt.impact],
                    _LEVEL_STYLE[opt.effort],
                    escape(opt.description),
                )
            self.console.print(table)

        if report.recommendations:
            self.console.print()
            self.console.print("[bold]Recommendations[/bold]")
            for rec in report.recommendations:
                self.console.print(f"  - {escape(rec)}")

    def render_audit(self, audit: StubAudit) -> None:
        if audit.clean:
            self.console.print(
                f"[green]No stubs found[/green] ({audit.substantive_count} substantive files)"
            )
            return

        if audit.trivial_files:
            table = Table(title=f"Stub files ({len(audit.trivial_files)})")
            table.add_column("File")
            table.add_column("Reason", style="dim")
            for item in audit.trivial_files:
                table.add_row(escape(item.path), escape(item.reason))
            self.console.print(table)

        if audit.empty_dirs:
            self.console.print(f"[yellow]Empty directories ({len(audit.empty_dirs)}):[/yellow]")
            for directory in audit.empty_dirs:
                self.console.print(f"  {escape(directory)}/")

        self.console.print(
            f"\n[dim]{audit.substantive_count} substantive, {len(audit.trivial_files)} trivial, "
            f"{len(audit.skipped)} unreadable[/dim]"
        )

    def format_report(self, report: Report) -> str:
        with self.console.capture() as capture:
            self.render_report(report)
        return capture.get()

    def format_audit(self, audit: StubAudit) -> str:
        with self.console.capture() as capture:
            self.render_audit(audit)
        return capture.get()
