"""Reduce per-file signals into project-level patterns and trends.

All thresholds come from ``healthcast.calibration`` and compare raw counts
against the total candidate count ``N``. With ``N == 0`` every comparison
is false, so patterns and trends are empty and complexity is LOW.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .. import calibration as cal
from ..signals.models import FileSignal
from .models import ComplexityTier, ProjectAggregate, SignalCounts


def classify_complexity(file_count: int) -> ComplexityTier:
    """Map a scanned file count onto a ComplexityTier."""
    if file_count > cal.COMPLEXITY_HIGH_ABOVE:
        return ComplexityTier.HIGH
    if file_count > cal.COMPLEXITY_MEDIUM_ABOVE:
        return ComplexityTier.MEDIUM
    return ComplexityTier.LOW


def count_signals(signals: Iterable[FileSignal], total: Optional[int] = None) -> SignalCounts:
    """Tally signals. ``total`` defaults to the number of signals."""
    component_like = state_hooks = typed_source = utility_styling = test_files = 0
    seen = 0
    for signal in signals:
        seen += 1
        component_like += signal.is_component_like
        state_hooks += signal.uses_state_hooks
        typed_source += signal.is_typed_source
        utility_styling += signal.uses_utility_styling
        test_files += signal.is_test_file

    return SignalCounts(
        total=seen if total is None else total,
        component_like=component_like,
        state_hooks=state_hooks,
        typed_source=typed_source,
        utility_styling=utility_styling,
        test_files=test_files,
    )


def derive_patterns(counts: SignalCounts) -> dict[str, bool]:
    n = counts.total
    detected = {
        cal.FUNCTIONAL_COMPONENTS: counts.component_like > cal.COMPONENT_IDIOM_MIN_COUNT,
        cal.TYPED_SOURCE: counts.typed_source > cal.TYPED_ADOPTION_RATIO * n,
        cal.UTILITY_STYLING: counts.utility_styling > cal.UTILITY_STYLING_RATIO * counts.component_like,
        cal.MODERN_STATE: counts.state_hooks > counts.component_like,
    }
    return {name: True for name, present in detected.items() if present}


def derive_trends(counts: SignalCounts) -> tuple[str, ...]:
    n = counts.total
    trends = []
    if counts.state_hooks / max(counts.component_like, 1) > cal.MODULARITY_HOOK_RATIO:
        trends.append(cal.INCREASING_MODULARITY)
    if counts.typed_source > cal.EXCELLENT_TYPED_RATIO * n:
        trends.append(cal.EXCELLENT_TYPED_ADOPTION)
    if counts.test_files < cal.LOW_TEST_COVERAGE_RATIO * n:
        trends.append(cal.LOW_TEST_COVERAGE)
    return tuple(trends)


def aggregate_signals(signals: Iterable[FileSignal], total: Optional[int] = None) -> ProjectAggregate:
    """Build the ProjectAggregate for one scan.

    Args:
        signals: FileSignal records of every readable candidate file
        total: Candidate count N; defaults to the number of signals

    Returns:
        ProjectAggregate (patterns, trends, complexity, counts)
    """
    counts = count_signals(signals, total)
    return ProjectAggregate(
        patterns=derive_patterns(counts),
        trends=derive_trends(counts),
        complexity=classify_complexity(counts.total),
        counts=counts,
    )
