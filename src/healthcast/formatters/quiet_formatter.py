"""Quiet formatter -- one line per result, for scripts and CI logs."""

from ..scoring import Report
from ..triviality import StubAudit
from .base import BaseFormatter


class QuietFormatter(BaseFormatter):
    """Minimal output: score and trend, or stub counts."""

    def format_report(self, report: Report) -> str:
        return f"{report.score} {report.trend} issues={len(report.issues)}"

    def format_audit(self, audit: StubAudit) -> str:
        return (
            f"trivial={len(audit.trivial_files)} empty_dirs={len(audit.empty_dirs)} "
            f"substantive={audit.substantive_count}"
        )
