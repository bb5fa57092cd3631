"""Composite score compilation."""

from .compiler import (
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
from .models import Report

__all__ = [
    "Report",
    "compile_report",
    "compute_score",
    "trend_for_score",
    "summary_for_score",
    "build_recommendations",
    "TREND_EXCELLENT",
    "TREND_GOOD",
    "TREND_IMPROVING",
    "TREND_NEEDS_ATTENTION",
]
