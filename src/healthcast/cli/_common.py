"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..logging_config import setup_logging

console = Console()
err_console = Console(stderr=True)

VALID_FORMATS = {"rich", "json", "quiet"}


def check_common_options(fmt: str, verbose: bool, quiet: bool, log_file: Optional[Path] = None) -> None:
    """Validate options shared by every command and configure logging."""
    if verbose and quiet:
        err_console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)
    if fmt not in VALID_FORMATS:
        err_console.print(f"[red]Error:[/red] --format must be one of: {', '.join(sorted(VALID_FORMATS))}")
        raise typer.Exit(1)
    setup_logging(verbose=verbose, quiet=quiet, log_file=str(log_file) if log_file else None)


def build_overrides(workers: Optional[int] = None, verbose: bool = False, quiet: bool = False) -> dict:
    """Translate CLI flags into load_config overrides."""
    overrides = {}
    if workers is not None:
        overrides["workers"] = workers
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return overrides
