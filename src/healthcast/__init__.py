"""
healthcast - predictive codebase health for component-based front-end projects.

Scans source files for structural signals, aggregates them into project
patterns and trends, turns those into predicted issues and optimizations,
and compiles a single 0-100 health score. Also classifies stub files.
"""

__version__ = "0.1.0"

from .api import analyze, audit, classify_triviality, run_predictive_analysis
from .scoring import Report
from .triviality import StubAudit

__all__ = [
    "run_predictive_analysis",  # Core entry point
    "classify_triviality",
    "analyze",  # File-system convenience wrappers
    "audit",
    "Report",
    "StubAudit",
]
