"""Candidate file enumeration.

Walks a project root, pruning excluded and hidden directories, and returns
source files sorted by relative path so repeated scans see the same order.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..config import AnalysisConfig
from ..file_ops import should_skip_file
from ..logging_config import get_logger
from ..security import ResourceLimiter

logger = get_logger(__name__)


def _prune(dirnames: list[str], config: AnalysisConfig) -> None:
    dirnames[:] = sorted(
        d
        for d in dirnames
        if d not in config.exclude_dirs and (config.allow_hidden_files or not d.startswith("."))
    )


def discover_source_files(root: Path, config: AnalysisConfig) -> list[Path]:
    """List candidate source files under ``root``.

    Args:
        root: Validated project root
        config: Supplies extensions, exclusions and limits

    Returns:
        Absolute file paths, sorted by their path relative to root

    Raises:
        SecurityError: If more than ``config.max_files`` candidates are found
    """
    limiter = ResourceLimiter(max_file_size=config.max_file_size_bytes, max_files=config.max_files)
    extensions = {ext.lower() for ext in config.include_extensions}
    found: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root, followlinks=config.follow_symlinks):
        _prune(dirnames, config)
        base = Path(dirpath)
        for name in filenames:
            if not config.allow_hidden_files and name.startswith("."):
                continue
            path = base / name
            if path.suffix.lower() not in extensions:
                continue
            if path.is_symlink() and not config.follow_symlinks:
                continue
            if should_skip_file(path.relative_to(root), config.exclude_patterns):
                continue
            limiter.increment_file_count()
            found.append(path)

    found.sort(key=lambda p: p.relative_to(root).as_posix())
    logger.debug(f"Discovered {len(found)} candidate files under {root}")
    return found


def find_empty_directories(root: Path, config: AnalysisConfig) -> list[Path]:
    """Directories below ``root`` that contain no entries at all."""
    empty: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, followlinks=config.follow_symlinks):
        # check before pruning: an excluded child still makes this dir non-empty
        if not dirnames and not filenames and Path(dirpath) != root:
            empty.append(Path(dirpath))
        _prune(dirnames, config)

    empty.sort(key=lambda p: p.relative_to(root).as_posix())
    return empty
