"""Signal extraction: one file's text in, one FileSignal out.

Detection rules are evaluated independently; a file can be component-like,
hook-using, typed and a test file at the same time.

``SignalExtractor`` fans extraction out over a thread pool when asked to.
Every FileSignal depends only on its own file, so the only coordination
needed is the fan-in: results are re-ordered to match the input order so
aggregation never sees a visitation-order dependent sequence.
"""

from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Callable, Optional, Sequence, Union

from ..exceptions import FileAccessError
from ..logging_config import get_logger
from .models import FileSignal

logger = get_logger(__name__)

PathLike = Union[str, PurePath]
ReadFile = Callable[[str], Optional[Union[str, bytes]]]

TYPED_EXTENSIONS = frozenset({".ts", ".tsx", ".mts", ".cts"})
TEST_SEGMENTS = (".test.", ".spec.")

# Component-style function-return idioms
_COMPONENT_PATTERNS = (
    re.compile(r"export\s+default\s+function\b"),
    re.compile(r"\bconst\s+[A-Z]\w*\s*(?::[^=]+)?=\s*\([^)]*\)\s*=>"),
    re.compile(r"\breturn\s*\(\s*<"),
)

_HOOK_PATTERN = re.compile(r"\buse(?:State|Effect|Reducer|LayoutEffect)\s*[(<]")

_CLASS_ATTRIBUTE = re.compile(r"\bclass(?:Name)?\s*=\s*[\"'`{]")
_UTILITY_CLASS = re.compile(
    r"[\"'`\s](?:flex|grid|hidden|block|"
    r"(?:bg|text|font|p[xytblr]?|m[xytblr]?|w|h|gap|space-[xy]|rounded|shadow|border)-[\w/.\[\]#-]+)"
    r"(?=[\s\"'`])"
)


def extract_signal(path: PathLike, text: str) -> FileSignal:
    """Compute the FileSignal for one file.

    Pure function of ``path`` and ``text``.
    """
    posix = PurePath(path).as_posix()
    suffix = PurePath(posix).suffix.lower()

    return FileSignal(
        path=posix,
        is_component_like=any(p.search(text) for p in _COMPONENT_PATTERNS),
        uses_state_hooks=_HOOK_PATTERN.search(text) is not None,
        is_typed_source=suffix in TYPED_EXTENSIONS,
        uses_utility_styling=_uses_utility_styling(text),
        is_test_file=any(segment in posix for segment in TEST_SEGMENTS),
    )


def _uses_utility_styling(text: str) -> bool:
    if _CLASS_ATTRIBUTE.search(text) is None:
        return False
    return _UTILITY_CLASS.search(text) is not None


@dataclass(frozen=True)
class ExtractionResult:
    """Fan-in of a whole extraction pass.

    ``scanned`` counts files that were read successfully; unreadable files
    are listed in ``skipped`` and contribute to nothing else.
    """

    signals: tuple[FileSignal, ...] = ()
    skipped: tuple[str, ...] = field(default_factory=tuple)

    @property
    def scanned(self) -> int:
        return len(self.signals)


class SignalExtractor:
    """Read and extract a set of files, optionally in parallel."""

    def __init__(self, workers: Optional[int] = None):
        if workers is not None and workers < 1:
            raise ValueError("workers must be at least 1")
        self.workers = workers

    def extract_all(self, paths: Sequence[PathLike], read_file: ReadFile) -> ExtractionResult:
        """Extract a FileSignal for every readable path.

        Args:
            paths: Candidate file paths
            read_file: Returns the file's text or bytes. Raising
                ``FileAccessError``/``OSError``/``UnicodeDecodeError`` or
                returning ``None`` means the file is skipped.

        Returns:
            ExtractionResult with signals in input order
        """
        keys = [str(p) for p in paths]

        if self.workers is None or self.workers == 1 or len(keys) < 2:
            outcomes = [self._extract_one(key, read_file) for key in keys]
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                # map() yields in submission order
                outcomes = list(executor.map(lambda k: self._extract_one(k, read_file), keys))

        signals = []
        skipped = []
        for key, signal in zip(keys, outcomes):
            if signal is None:
                skipped.append(key)
            else:
                signals.append(signal)

        if skipped:
            logger.debug(f"Skipped {len(skipped)}/{len(keys)} unreadable files")
            if len(skipped) > len(keys) / 2:
                logger.warning(f"More than half of the candidate files were unreadable ({len(skipped)}/{len(keys)})")

        return ExtractionResult(signals=tuple(signals), skipped=tuple(skipped))

    @staticmethod
    def _extract_one(path: str, read_file: ReadFile) -> Optional[FileSignal]:
        try:
            content = read_file(path)
        except (FileAccessError, OSError, UnicodeDecodeError) as e:
            logger.debug(f"Skipping {path}: {e}")
            return None

        if content is None:
            logger.debug(f"Skipping {path}: not found")
            return None
        if isinstance(content, bytes):
            content = content.decode("utf-8", errors="replace")

        return extract_signal(path, content)
