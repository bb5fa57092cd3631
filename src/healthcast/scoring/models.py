"""The report produced once per scan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..rules.models import Optimization, Prediction


@dataclass(frozen=True)
class Report:
    """Composite health report.

    Contains no timestamps or paths, so two runs over the same file
    contents produce equal reports.
    """

    issues: tuple[Prediction, ...]
    optimizations: tuple[Optimization, ...]
    score: int
    trend: str
    summary: str
    recommendations: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "trend": self.trend,
            "summary": self.summary,
            "issues": [issue.to_dict() for issue in self.issues],
            "optimizations": [opt.to_dict() for opt in self.optimizations],
            "recommendations": list(self.recommendations),
        }
