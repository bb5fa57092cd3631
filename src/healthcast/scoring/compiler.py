"""Score compilation.

    high = |{issue : severity in {high, critical}}|
    score = clamp(100 - 15*high - 5*|issues|, 0, 100)

The trend label and summary are functions of the score alone.
"""

from __future__ import annotations

from typing import Sequence

from .. import calibration as cal
from ..rules.models import IssueType, Level, Optimization, Prediction, Severity
from .models import Report

TREND_EXCELLENT = "excellent"
TREND_GOOD = "good"
TREND_IMPROVING = "improving"
TREND_NEEDS_ATTENTION = "needs attention"

SUMMARY_EXCELLENT = "Codebase health is excellent; keep following current practices."
SUMMARY_GOOD = "Codebase health is good, with a few areas worth improving."
SUMMARY_ATTENTION = "Codebase health needs attention; address the high-severity issues first."

RECOMMEND_PERFORMANCE = "Prioritize performance work"
RECOMMEND_MAINTAINABILITY = "Invest in maintainability"
RECOMMEND_QUICK_WINS = "Quick wins available"

_HIGH_SEVERITIES = frozenset({Severity.HIGH, Severity.CRITICAL})


def compute_score(issues: Sequence[Prediction]) -> int:
    high_count = sum(1 for issue in issues if issue.severity in _HIGH_SEVERITIES)
    raw = cal.SCORE_MAX - cal.HIGH_SEVERITY_PENALTY * high_count - cal.PER_ISSUE_PENALTY * len(issues)
    return max(cal.SCORE_MIN, min(cal.SCORE_MAX, raw))


def trend_for_score(score: int) -> str:
    if score >= cal.TREND_EXCELLENT_MIN:
        return TREND_EXCELLENT
    if score >= cal.TREND_GOOD_MIN:
        return TREND_GOOD
    if score >= cal.TREND_IMPROVING_MIN:
        return TREND_IMPROVING
    return TREND_NEEDS_ATTENTION


def summary_for_score(score: int) -> str:
    # improving and needs-attention share one template
    if score >= cal.TREND_EXCELLENT_MIN:
        return SUMMARY_EXCELLENT
    if score >= cal.TREND_GOOD_MIN:
        return SUMMARY_GOOD
    return SUMMARY_ATTENTION


def build_recommendations(
    issues: Sequence[Prediction], optimizations: Sequence[Optimization]
) -> tuple[str, ...]:
    recommendations = []
    if any(issue.type is IssueType.PERFORMANCE for issue in issues):
        recommendations.append(RECOMMEND_PERFORMANCE)
    if any(issue.type is IssueType.MAINTENANCE for issue in issues):
        recommendations.append(RECOMMEND_MAINTAINABILITY)
    if any(opt.effort is Level.LOW and opt.impact is Level.HIGH for opt in optimizations):
        recommendations.append(RECOMMEND_QUICK_WINS)
    return tuple(recommendations)


def compile_report(issues: Sequence[Prediction], optimizations: Sequence[Optimization]) -> Report:
    """Combine rule-engine output into the final Report. No I/O."""
    score = compute_score(issues)
    return Report(
        issues=tuple(issues),
        optimizations=tuple(optimizations),
        score=score,
        trend=trend_for_score(score),
        summary=summary_for_score(score),
        recommendations=build_recommendations(issues, optimizations),
    )
