"""Public API for healthcast.

Two pure entry points make up the core:

    >>> report = run_predictive_analysis(paths, read_file)
    >>> classify_triviality("export {};")
    True

``analyze`` and ``audit`` wire those to the local file system:

    >>> report = analyze("/path/to/project", workers=4)
    >>> stubs = audit("/path/to/project")
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .config import load_config
from .file_ops import safe_read_file
from .logging_config import get_logger
from .pipeline import HealthPipeline, PipelineResult
from .scanning import discover_source_files
from .scoring import Report
from .security import PathValidator, ResourceLimiter, validate_root_directory
from .signals.extractor import PathLike, ReadFile
from .sources import PredictionClient, PredictionSource, build_prediction_source
from .triviality import StubAudit, audit_directory, classify_triviality

logger = get_logger(__name__)

__all__ = [
    "run_predictive_analysis",
    "classify_triviality",
    "analyze",
    "analyze_detailed",
    "audit",
]


def run_predictive_analysis(
    paths: Sequence[PathLike],
    read_file: ReadFile,
    source: Optional[PredictionSource] = None,
    workers: Optional[int] = None,
) -> Report:
    """Scan ``paths`` and compile a health report.

    Args:
        paths: Candidate source files
        read_file: Returns a file's text/bytes; raising or returning None
            skips the file
        source: Prediction source (default: static rule tables)
        workers: Thread pool size for extraction (None = sequential)

    Returns:
        Report
    """
    return HealthPipeline(source=source, workers=workers).run(paths, read_file)


def analyze_detailed(
    path: str = ".",
    config_file: Optional[Path] = None,
    client: Optional[PredictionClient] = None,
    **overrides,
) -> PipelineResult:
    """Like ``analyze`` but also returns the aggregate and extraction."""
    config = load_config(config_file=config_file, **overrides)
    root = validate_root_directory(Path(path))
    logger.info(f"Starting analysis of {root}")

    files = discover_source_files(root, config)
    validator = PathValidator(root, allow_hidden=config.allow_hidden_files)
    limiter = ResourceLimiter(max_file_size=config.max_file_size_bytes, max_files=config.max_files)

    def read_file(rel: str) -> str:
        return safe_read_file(root / rel, validator=validator, limiter=limiter)

    # relative paths keep the report independent of where the project lives
    rel_paths = [p.relative_to(root).as_posix() for p in files]

    source = build_prediction_source(config.prediction_source, client=client)
    pipeline = HealthPipeline(source=source, workers=config.workers)
    return pipeline.run_detailed(rel_paths, read_file)


def analyze(
    path: str = ".",
    config_file: Optional[Path] = None,
    client: Optional[PredictionClient] = None,
    **overrides,
) -> Report:
    """Run the predictive analysis over a project directory.

    Args:
        path: Project root
        config_file: Optional explicit TOML config
        client: Prediction service client, used when
            ``prediction_source="service"``
        **overrides: Configuration overrides (e.g. workers=4)

    Raises:
        HealthcastError: Invalid configuration or root directory
    """
    return analyze_detailed(path, config_file=config_file, client=client, **overrides).report


def audit(path: str = ".", config_file: Optional[Path] = None, **overrides) -> StubAudit:
    """Find stub files and empty directories under a project root."""
    config = load_config(config_file=config_file, **overrides)
    root = validate_root_directory(Path(path))
    logger.info(f"Starting stub audit of {root}")
    return audit_directory(root, config)
