"""Rule engines turning project aggregates into predictions and optimizations."""

from .engine import evaluate_rules, validate_rules
from .models import (
    ComplexityIs,
    IssueType,
    Level,
    Optimization,
    OptimizationType,
    PatternAbsent,
    PatternPresent,
    Prediction,
    Rule,
    Severity,
    TrendPresent,
)
from .optimizations import OPTIMIZATION_RULES, suggest_optimizations
from .predictions import PREDICTION_RULES, predict_issues

__all__ = [
    "IssueType",
    "Severity",
    "Level",
    "OptimizationType",
    "Prediction",
    "Optimization",
    "Rule",
    "PatternPresent",
    "PatternAbsent",
    "TrendPresent",
    "ComplexityIs",
    "PREDICTION_RULES",
    "OPTIMIZATION_RULES",
    "evaluate_rules",
    "validate_rules",
    "predict_issues",
    "suggest_optimizations",
]
