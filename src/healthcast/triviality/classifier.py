"""Triviality classifier: is a file substantive or a placeholder?

Decision order, first match wins:

    1. empty after trimming
    2. fewer than 50 characters after trimming
    3. whole text matches a stub-shape pattern
    4. fewer than 3 meaningful lines

A meaningful line is non-blank, not a comment and not a lone brace or
semicolon token. The classifier looks at text only, so identical text
always gets the same verdict.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .patterns import find_stub_pattern

MIN_SUBSTANTIVE_CHARS = 50
MIN_MEANINGFUL_LINES = 3

_PUNCTUATION_ONLY = re.compile(r"[{}()\[\];,]+")


@dataclass(frozen=True)
class TrivialityVerdict:
    """Verdict for one file. ``reason`` is for diagnostics only."""

    is_trivial: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_trivial


def _code_outside_comments(line: str, in_block: bool) -> tuple[str, bool]:
    """Strip comments from one line.

    Returns the code that remains and whether a block comment is still
    open at the end of the line. Quotes are tracked so ``"/*"`` inside a
    string literal does not open a comment.
    """
    code = []
    quote = None
    i = 0
    while i < len(line):
        if in_block:
            end = line.find("*/", i)
            if end == -1:
                return "".join(code), True
            in_block = False
            i = end + 2
            continue

        ch = line[i]
        if quote is not None:
            code.append(ch)
            if ch == "\\" and i + 1 < len(line):
                code.append(line[i + 1])
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in "\"'`":
            quote = ch
            code.append(ch)
        elif line.startswith("//", i):
            break
        elif line.startswith("/*", i):
            in_block = True
            i += 2
            continue
        else:
            code.append(ch)
        i += 1
    return "".join(code), in_block


def count_meaningful_lines(text: str) -> int:
    """Count non-blank, non-comment, non-punctuation lines."""
    count = 0
    in_block = False
    for raw in text.splitlines():
        code, in_block = _code_outside_comments(raw, in_block)
        code = code.strip()
        if not code or _PUNCTUATION_ONLY.fullmatch(code):
            continue
        count += 1
    return count


def explain_triviality(text: str) -> TrivialityVerdict:
    """Classify ``text`` and say why."""
    trimmed = text.strip()
    if not trimmed:
        return TrivialityVerdict(True, "empty")
    if len(trimmed) < MIN_SUBSTANTIVE_CHARS:
        return TrivialityVerdict(True, f"too short ({len(trimmed)} chars)")

    stub = find_stub_pattern(trimmed)
    if stub is not None:
        return TrivialityVerdict(True, f"stub pattern: {stub.description}")

    meaningful = count_meaningful_lines(trimmed)
    if meaningful < MIN_MEANINGFUL_LINES:
        return TrivialityVerdict(True, f"only {meaningful} meaningful lines")
    return TrivialityVerdict(False)


def classify_triviality(text: str) -> bool:
    """Return True if ``text`` is a stub or empty placeholder."""
    return explain_triviality(text).is_trivial
