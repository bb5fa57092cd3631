"""Project-level pattern aggregation."""

from .aggregator import aggregate_signals, classify_complexity, count_signals
from .models import ComplexityTier, ProjectAggregate, SignalCounts

__all__ = [
    "ComplexityTier",
    "ProjectAggregate",
    "SignalCounts",
    "aggregate_signals",
    "classify_complexity",
    "count_signals",
]
