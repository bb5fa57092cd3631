"""Stub and empty-directory audit over a project tree."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..config import AnalysisConfig
from ..exceptions import FileAccessError
from ..file_ops import safe_read_file
from ..logging_config import get_logger
from ..scanning import discover_source_files, find_empty_directories
from ..security import PathValidator, ResourceLimiter
from .classifier import explain_triviality
from .patterns import STUB_PATTERNS_VERSION

logger = get_logger(__name__)


@dataclass(frozen=True)
class TrivialFile:
    path: str
    reason: str


@dataclass(frozen=True)
class StubAudit:
    """Result of auditing a tree for placeholders.

    Attributes:
        trivial_files: Stub or empty files, with the diagnostic reason
        empty_dirs: Directories that contain nothing
        substantive_count: Files classified as real code
        skipped: Files that could not be read
        patterns_version: Version of the stub pattern table used
    """

    trivial_files: tuple[TrivialFile, ...] = ()
    empty_dirs: tuple[str, ...] = ()
    substantive_count: int = 0
    skipped: tuple[str, ...] = ()
    patterns_version: str = STUB_PATTERNS_VERSION

    @property
    def scanned(self) -> int:
        return self.substantive_count + len(self.trivial_files)

    @property
    def clean(self) -> bool:
        return not self.trivial_files and not self.empty_dirs

    def to_dict(self) -> dict[str, Any]:
        return {
            "patterns_version": self.patterns_version,
            "scanned": self.scanned,
            "substantive_count": self.substantive_count,
            "trivial_files": [{"path": f.path, "reason": f.reason} for f in self.trivial_files],
            "empty_dirs": list(self.empty_dirs),
            "skipped": list(self.skipped),
        }


def audit_directory(root: Path, config: AnalysisConfig) -> StubAudit:
    """Classify every candidate file under ``root`` and list empty directories.

    ``root`` must already be validated. Unreadable files are listed in
    ``skipped`` and otherwise ignored.
    """
    validator = PathValidator(root, allow_hidden=config.allow_hidden_files)
    limiter = ResourceLimiter(max_file_size=config.max_file_size_bytes, max_files=config.max_files)

    trivial: list[TrivialFile] = []
    skipped: list[str] = []
    substantive = 0

    for path in discover_source_files(root, config):
        rel = path.relative_to(root).as_posix()
        try:
            text = safe_read_file(path, validator=validator, limiter=limiter)
        except FileAccessError as e:
            logger.debug(f"Skipping {rel}: {e.reason}")
            skipped.append(rel)
            continue

        verdict = explain_triviality(text)
        if verdict.is_trivial:
            logger.debug(f"{rel}: trivial ({verdict.reason})")
            trivial.append(TrivialFile(path=rel, reason=verdict.reason or "trivial"))
        else:
            substantive += 1

    empty_dirs = tuple(p.relative_to(root).as_posix() for p in find_empty_directories(root, config))

    logger.info(
        f"Audit complete: {substantive} substantive, {len(trivial)} trivial, "
        f"{len(empty_dirs)} empty directories"
    )
    return StubAudit(
        trivial_files=tuple(trivial),
        empty_dirs=empty_dirs,
        substantive_count=substantive,
        skipped=tuple(skipped),
    )
