"""Project-level aggregate: patterns, trends and complexity tier."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ComplexityTier(Enum):
    """Project size bucket, derived from the scanned file count."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class SignalCounts:
    """Raw counts behind the patterns and trends."""

    total: int = 0
    component_like: int = 0
    state_hooks: int = 0
    typed_source: int = 0
    utility_styling: int = 0
    test_files: int = 0


@dataclass(frozen=True)
class ProjectAggregate:
    """Everything the rule engines are allowed to look at.

    Attributes:
        patterns: Detected patterns. Only present patterns are stored, so an
            empty file set yields an empty mapping.
        trends: Trend statements, in fixed declaration order.
        complexity: Size tier for the scanned file count.
        counts: The counts the above were derived from (reporting only).
    """

    patterns: dict[str, bool] = field(default_factory=dict)
    trends: tuple[str, ...] = ()
    complexity: ComplexityTier = ComplexityTier.LOW
    counts: SignalCounts = field(default_factory=SignalCounts)

    def has_pattern(self, name: str) -> bool:
        return self.patterns.get(name, False)

    def has_trend(self, statement: str) -> bool:
        return statement in self.trends

    def to_payload(self) -> dict[str, Any]:
        """Plain-data form, used when handing the aggregate to a service."""
        return {
            "patterns": dict(self.patterns),
            "trends": list(self.trends),
            "complexity": self.complexity.value,
            "counts": {
                "total": self.counts.total,
                "component_like": self.counts.component_like,
                "state_hooks": self.counts.state_hooks,
                "typed_source": self.counts.typed_source,
                "utility_styling": self.counts.utility_styling,
                "test_files": self.counts.test_files,
            },
        }
