"""Base formatter interface for healthcast output rendering."""

from abc import ABC, abstractmethod

from ..scoring import Report
from ..triviality import StubAudit


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render_report(self, report: Report) -> None:
        """Print a health report to stdout."""
        print(self.format_report(report))

    def render_audit(self, audit: StubAudit) -> None:
        """Print a stub audit to stdout."""
        print(self.format_audit(audit))

    @abstractmethod
    def format_report(self, report: Report) -> str:
        """Return formatted string representation of a report."""

    @abstractmethod
    def format_audit(self, audit: StubAudit) -> str:
        """Return formatted string representation of an audit."""
