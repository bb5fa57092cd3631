"""Stub / placeholder detection."""

from .audit import StubAudit, TrivialFile, audit_directory
from .classifier import (
    MIN_MEANINGFUL_LINES,
    MIN_SUBSTANTIVE_CHARS,
    TrivialityVerdict,
    classify_triviality,
    count_meaningful_lines,
    explain_triviality,
)
from .patterns import STUB_PATTERNS, STUB_PATTERNS_VERSION, StubPattern, find_stub_pattern

__all__ = [
    "TrivialityVerdict",
    "classify_triviality",
    "explain_triviality",
    "count_meaningful_lines",
    "MIN_SUBSTANTIVE_CHARS",
    "MIN_MEANINGFUL_LINES",
    "StubPattern",
    "STUB_PATTERNS",
    "STUB_PATTERNS_VERSION",
    "find_stub_pattern",
    "StubAudit",
    "TrivialFile",
    "audit_directory",
]
