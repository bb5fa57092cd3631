"""Tests for score compilation."""

import pytest

from healthcast.rules import IssueType, Level, Optimization, OptimizationType, Prediction, Severity
from healthcast.scoring import (
    TREND_EXCELLENT,
    TREND_GOOD,
    TREND_IMPROVING,
    TREND_NEEDS_ATTENTION,
    build_recommendations,
    compile_report,
    compute_score,
    summary_for_score,
    trend_for_score,
)


def _issue(type_=IssueType.MAINTENANCE, severity=Severity.LOW):
    return Prediction(type_, "msg", "desc", severity, 50, "act")


def _opt(impact=Level.MEDIUM, effort=Level.LOW):
    return Optimization(OptimizationType.PERFORMANCE, "desc", impact, effort)


class TestComputeScore:
    """Score arithmetic and clamping."""

    def test_no_issues(self):
        assert compute_score([]) == 100

    def test_low_severity_issue(self):
        assert compute_score([_issue()]) == 95

    def test_high_severity_issue(self):
        assert compute_score([_issue(severity=Severity.HIGH)]) == 80

    def test_critical_counts_as_high(self):
        assert compute_score([_issue(severity=Severity.CRITICAL)]) == 80

    def test_mixed(self):
        issues = [
            _issue(IssueType.PERFORMANCE, Severity.MEDIUM),
            _issue(IssueType.MAINTENANCE, Severity.HIGH),
            _issue(IssueType.SECURITY, Severity.MEDIUM),
        ]
        assert compute_score(issues) == 70

    def test_clamped_at_zero(self):
        issues = [_issue(severity=Severity.CRITICAL)] * 6
        assert compute_score(issues) == 0


class TestTrendAndSummary:
    """Labels are pure functions of the score."""

    @pytest.mark.parametrize(
        "score,trend",
        [
            (100, TREND_EXCELLENT),
            (85, TREND_EXCELLENT),
            (84, TREND_GOOD),
            (70, TREND_GOOD),
            (69, TREND_IMPROVING),
            (50, TREND_IMPROVING),
            (49, TREND_NEEDS_ATTENTION),
            (0, TREND_NEEDS_ATTENTION),
        ],
    )
    def test_trend_boundaries(self, score, trend):
        assert trend_for_score(score) == trend

    def test_three_summary_templates(self):
        summaries = {summary_for_score(s) for s in (100, 85, 84, 70, 69, 50, 49, 0)}
        assert len(summaries) == 3

    def test_improving_and_attention_share_summary(self):
        assert summary_for_score(60) == summary_for_score(10)
        assert summary_for_score(60) != summary_for_score(75)


class TestRecommendations:
    """Recommendation order and triggers."""

    def test_none(self):
        assert build_recommendations([], []) == ()

    def test_performance_then_maintainability(self):
        issues = [_issue(IssueType.MAINTENANCE), _issue(IssueType.PERFORMANCE)]
        assert build_recommendations(issues, []) == (
            "Prioritize performance work",
            "Invest in maintainability",
        )

    def test_security_issue_has_no_recommendation(self):
        assert build_recommendations([_issue(IssueType.SECURITY)], []) == ()

    def test_quick_win_needs_high_impact_and_low_effort(self):
        assert build_recommendations([], [_opt(Level.HIGH, Level.LOW)]) == ("Quick wins available",)
        assert build_recommendations([], [_opt(Level.MEDIUM, Level.LOW)]) == ()
        assert build_recommendations([], [_opt(Level.HIGH, Level.MEDIUM)]) == ()


class TestCompileReport:
    """Full report assembly."""

    def test_empty(self):
        report = compile_report([], [])
        assert report.score == 100
        assert report.trend == TREND_EXCELLENT
        assert report.issues == ()
        assert report.optimizations == ()
        assert report.recommendations == ()

    def test_lists_pass_through_in_order(self):
        issues = [_issue(IssueType.SECURITY), _issue(IssueType.PERFORMANCE)]
        opts = [_opt(Level.HIGH, Level.HIGH), _opt()]
        report = compile_report(issues, opts)
        assert list(report.issues) == issues
        assert list(report.optimizations) == opts

    def test_to_dict(self):
        report = compile_report([_issue(severity=Severity.HIGH)], [_opt()])
        data = report.to_dict()
        assert data["score"] == 80
        assert data["trend"] == TREND_GOOD
        assert data["issues"][0]["severity"] == "high"
        assert data["optimizations"][0]["effort"] == "low"
        assert data["recommendations"] == ["Invest in maintainability"]
