"""Analyze command -- predictive health report for a project."""

from pathlib import Path
from typing import Optional

import typer

from ..api import analyze as run_analysis
from ..exceptions import HealthcastError
from ..formatters import JsonFormatter, get_formatter
from ..logging_config import get_logger
from . import app
from ._common import build_overrides, check_common_options, console, err_console

logger = get_logger(__name__)


@app.command()
def analyze(
    path: Path = typer.Argument(
        Path("."),
        help="Project root to analyze",
        file_okay=False,
        dir_okay=True,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default), json, quiet",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the report as JSON to this file",
        dir_okay=False,
    ),
    fail_below: Optional[int] = typer.Option(
        None,
        "--fail-below",
        help="Exit 1 if the health score is below this value (for CI gating)",
        min=0,
        max=100,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Parallel extraction workers (default: sequential)",
        min=1,
        max=64,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all but ERROR logging"),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
):
    """
    Predict codebase health issues and compile a 0-100 score.

    [bold cyan]Examples:[/bold cyan]

      healthcast analyze .

      healthcast analyze ./web --format json | jq .score

      healthcast analyze . --fail-below 70 --format quiet
    """
    check_common_options(fmt, verbose, quiet, log_file)

    try:
        report = run_analysis(
            str(path),
            config_file=config,
            **build_overrides(workers=workers, verbose=verbose, quiet=quiet),
        )
    except HealthcastError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    get_formatter(fmt).render_report(report)

    if output is not None:
        output.write_text(JsonFormatter().format_report(report) + "\n", encoding="utf-8")
        if fmt == "rich":
            console.print(f"[dim]Report written to {output}[/dim]")

    if fail_below is not None and report.score < fail_below:
        if fmt == "rich":
            console.print(f"\n[red]FAIL:[/red] score {report.score} is below {fail_below}")
        raise typer.Exit(1)
