"""Prediction and optimization records, plus the declarative rule model.

Rules are data: an ordered tuple of conditions (all must hold) and the
record to emit when they do. Conditions name patterns and trends by key so
a rule table can be checked against the known vocabulary before use.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

from ..aggregation.models import ComplexityTier, ProjectAggregate


class IssueType(Enum):
    PERFORMANCE = "performance"
    MAINTENANCE = "maintenance"
    SCALABILITY = "scalability"
    SECURITY = "security"


class Severity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Level(Enum):
    """Impact / effort scale for optimizations."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class OptimizationType(Enum):
    PERFORMANCE = "performance"
    ARCHITECTURE = "architecture"
    BUNDLE = "bundle"


@dataclass(frozen=True)
class Prediction:
    """A forecast codebase problem.

    Attributes:
        type: Issue category
        message: One-line headline
        description: Longer explanation
        severity: low | medium | high | critical
        confidence: Integer percentage in [0, 100]
        suggested_action: What to do about it
    """

    type: IssueType
    message: str
    description: str
    severity: Severity
    confidence: int
    suggested_action: str

    def __post_init__(self) -> None:
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"confidence must be between 0 and 100, got {self.confidence}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "message": self.message,
            "description": self.description,
            "severity": self.severity.value,
            "confidence": self.confidence,
            "suggested_action": self.suggested_action,
        }


@dataclass(frozen=True)
class Optimization:
    """A suggested improvement with its expected impact and cost."""

    type: OptimizationType
    description: str
    impact: Level
    effort: Level

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "description": self.description,
            "impact": self.impact.value,
            "effort": self.effort.value,
        }


# --- Conditions ---


@dataclass(frozen=True)
class PatternPresent:
    pattern: str

    def holds(self, aggregate: ProjectAggregate) -> bool:
        return aggregate.has_pattern(self.pattern)


@dataclass(frozen=True)
class PatternAbsent:
    pattern: str

    def holds(self, aggregate: ProjectAggregate) -> bool:
        return not aggregate.has_pattern(self.pattern)


@dataclass(frozen=True)
class TrendPresent:
    trend: str

    def holds(self, aggregate: ProjectAggregate) -> bool:
        return aggregate.has_trend(self.trend)


@dataclass(frozen=True)
class ComplexityIs:
    tier: ComplexityTier

    def holds(self, aggregate: ProjectAggregate) -> bool:
        return aggregate.complexity is self.tier


Condition = Union[PatternPresent, PatternAbsent, TrendPresent, ComplexityIs]

R = TypeVar("R", Prediction, Optimization)


@dataclass(frozen=True)
class Rule(Generic[R]):
    """A named (conditions -> result) pair.

    Attributes:
        name: Unique identifier within its table
        when: Conditions that must all hold
        result: Record emitted when the rule fires
    """

    name: str
    when: tuple[Condition, ...]
    result: R

    def matches(self, aggregate: ProjectAggregate) -> bool:
        return all(condition.holds(aggregate) for condition in self.when)
