"""Stub-shape pattern table.

Each pattern must match the *whole* trimmed file text. A file that merely
contains a TODO somewhere is not a stub; a file that is nothing but a TODO
is. Bump ``STUB_PATTERNS_VERSION`` whenever the table changes, since the
audit output depends on it.
"""

import re
from dataclasses import dataclass
from typing import Pattern

STUB_PATTERNS_VERSION = "1"


@dataclass(frozen=True)
class StubPattern:
    name: str
    regex: Pattern[str]
    description: str

    def matches(self, trimmed: str) -> bool:
        return self.regex.fullmatch(trimmed) is not None


_ONE_BLOCK_COMMENT = r"/\*(?:(?!\*/)[\s\S])*\*/"

STUB_PATTERNS: tuple[StubPattern, ...] = (
    StubPattern(
        name="empty-export",
        regex=re.compile(r"(?:import\b[^\n]*\n\s*)*export\s*\{\s*\}\s*;?"),
        description="empty export statement",
    ),
    StubPattern(
        name="lone-todo",
        regex=re.compile(r"(?://|#)\s*TODO\b[^\n]*|/\*\s*TODO\b(?:(?!\*/)[\s\S])*\*/", re.IGNORECASE),
        description="a lone TODO comment",
    ),
    StubPattern(
        name="comment-only",
        regex=re.compile(_ONE_BLOCK_COMMENT + r"|(?://[^\n]*(?:\n\s*|$))+"),
        description="a single comment block with nothing else",
    ),
    StubPattern(
        name="empty-default-export",
        regex=re.compile(
            r"export\s+default\s+(?:"
            r"\{\s*\}"
            r"|\(\s*\)\s*=>\s*(?:\{\s*\}|null|\(\s*\))"
            r"|function\s*\w*\s*\(\s*\)\s*\{\s*\}"
            r"|class\s+\w*\s*\{\s*\}"
            r")\s*;?"
        ),
        description="an empty default export",
    ),
    StubPattern(
        name="empty-object-export",
        regex=re.compile(
            r"(?:const|let|var)\s+(\w+)\s*(?::[^=\n]+)?=\s*\{\s*\}\s*;?\s*"
            r"export\s+(?:default\s+\1|\{\s*\1\s*\})\s*;?"
        ),
        description="an empty object that is immediately exported",
    ),
)


def find_stub_pattern(trimmed: str):
    """Return the first StubPattern matching ``trimmed``, or None."""
    for pattern in STUB_PATTERNS:
        if pattern.matches(trimmed):
            return pattern
    return None
