"""JSON formatter for healthcast."""

import json

from ..scoring import Report
from ..triviality import StubAudit
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render reports as JSON."""

    def format_report(self, report: Report) -> str:
        return json.dumps(report.to_dict(), indent=2)

    def format_audit(self, audit: StubAudit) -> str:
        return json.dumps(audit.to_dict(), indent=2)
