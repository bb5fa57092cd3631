"""Prediction rule table."""

from __future__ import annotations

from ..aggregation.models import ComplexityTier, ProjectAggregate
from .. import calibration as cal
from .engine import evaluate_rules
from .models import (
    ComplexityIs,
    IssueType,
    PatternAbsent,
    PatternPresent,
    Prediction,
    Rule,
    Severity,
    TrendPresent,
)

PREDICTION_RULES: tuple[Rule[Prediction], ...] = (
    Rule(
        name="large-bundle",
        when=(ComplexityIs(ComplexityTier.HIGH), PatternAbsent(cal.PERFORMANCE_OPTIMIZATION)),
        result=Prediction(
            type=IssueType.PERFORMANCE,
            message="Large bundle size predicted",
            description="A project of this size without performance optimizations tends to ship oversized bundles.",
            severity=Severity.MEDIUM,
            confidence=85,
            suggested_action="Introduce code splitting and lazy loading",
        ),
    ),
    Rule(
        name="untyped-components",
        when=(PatternPresent(cal.FUNCTIONAL_COMPONENTS), PatternAbsent(cal.TYPED_SOURCE)),
        result=Prediction(
            type=IssueType.MAINTENANCE,
            message="Type safety gaps in component code",
            description="Many components are written without static types, which makes refactoring riskier.",
            severity=Severity.LOW,
            confidence=70,
            suggested_action="Consider migrating toward a typed source language",
        ),
    ),
    Rule(
        name="low-test-coverage",
        when=(TrendPresent(cal.LOW_TEST_COVERAGE),),
        result=Prediction(
            type=IssueType.MAINTENANCE,
            message="High maintenance burden predicted",
            description="Test files make up less than 30% of the codebase; regressions are likely to go unnoticed.",
            severity=Severity.HIGH,
            confidence=90,
            suggested_action="Adopt a comprehensive testing strategy",
        ),
    ),
    Rule(
        name="security-audit",
        when=(ComplexityIs(ComplexityTier.HIGH),),
        result=Prediction(
            type=IssueType.SECURITY,
            message="Growing attack surface",
            description="Large projects accumulate dependencies and entry points that drift out of review.",
            severity=Severity.MEDIUM,
            confidence=75,
            suggested_action="Schedule recurring security audits and dependency updates",
        ),
    ),
)


def predict_issues(aggregate: ProjectAggregate) -> list[Prediction]:
    """Run the prediction table against an aggregate."""
    return evaluate_rules(PREDICTION_RULES, aggregate)
