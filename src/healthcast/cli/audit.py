"""Audit command -- find stub files and empty directories."""

from pathlib import Path
from typing import Optional

import typer

from ..api import audit as run_audit
from ..exceptions import HealthcastError
from ..formatters import get_formatter
from ..logging_config import get_logger
from . import app
from ._common import build_overrides, check_common_options, err_console

logger = get_logger(__name__)


@app.command()
def audit(
    path: Path = typer.Argument(
        Path("."),
        help="Project root to audit",
        file_okay=False,
        dir_okay=True,
    ),
    fmt: str = typer.Option("rich", "--format", "-f", help="Output format: rich (default), json, quiet"),
    fail_on_stubs: bool = typer.Option(
        False,
        "--fail-on-stubs",
        help="Exit 1 if any stub file or empty directory is found",
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
    List placeholder files (empty, stub-shaped, or nearly content-free)
    and empty directories.

    [bold cyan]Examples:[/bold cyan]

      healthcast audit src

      healthcast audit . --format json --fail-on-stubs
    """
    check_common_options(fmt, verbose, quiet, log_file)

    try:
        result = run_audit(str(path), config_file=config, **build_overrides(verbose=verbose, quiet=quiet))
    except HealthcastError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    get_formatter(fmt).render_audit(result)

    if fail_on_stubs and not result.clean:
        raise typer.Exit(1)
