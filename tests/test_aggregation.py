"""Tests for project-level pattern aggregation."""

import pytest

from healthcast import calibration as cal
from healthcast.aggregation import ComplexityTier, aggregate_signals, classify_complexity, count_signals


class TestClassifyComplexity:
    """Test the file-count complexity tiers."""

    @pytest.mark.parametrize(
        "count,tier",
        [
            (0, ComplexityTier.LOW),
            (20, ComplexityTier.LOW),
            (21, ComplexityTier.MEDIUM),
            (50, ComplexityTier.MEDIUM),
            (51, ComplexityTier.HIGH),
            (5000, ComplexityTier.HIGH),
        ],
    )
    def test_boundaries(self, count, tier):
        assert classify_complexity(count) is tier


class TestAggregateSignals:
    """Test pattern and trend thresholds."""

    def test_empty_file_set(self):
        aggregate = aggregate_signals([])
        assert aggregate.patterns == {}
        assert aggregate.trends == ()
        assert aggregate.complexity is ComplexityTier.LOW
        assert aggregate.counts.total == 0

    def test_functional_component_threshold(self, make_signals):
        assert not aggregate_signals(make_signals(10, component_like=5)).has_pattern(cal.FUNCTIONAL_COMPONENTS)
        assert aggregate_signals(make_signals(10, component_like=6)).has_pattern(cal.FUNCTIONAL_COMPONENTS)

    def test_typed_source_threshold_is_strict(self, make_signals):
        assert not aggregate_signals(make_signals(10, typed_source=7)).has_pattern(cal.TYPED_SOURCE)
        assert aggregate_signals(make_signals(10, typed_source=8)).has_pattern(cal.TYPED_SOURCE)

    def test_utility_styling_relative_to_components(self, make_signals):
        signals = make_signals(10, component_like=6, utility_styling=3)
        assert not aggregate_signals(signals).has_pattern(cal.UTILITY_STYLING)
        signals = make_signals(10, component_like=6, utility_styling=4)
        assert aggregate_signals(signals).has_pattern(cal.UTILITY_STYLING)

    def test_utility_styling_without_components(self, make_signals):
        assert aggregate_signals(make_signals(3, utility_styling=1)).has_pattern(cal.UTILITY_STYLING)

    def test_modern_state_needs_more_hooks_than_components(self, make_signals):
        assert not aggregate_signals(make_signals(10, component_like=4, state_hooks=4)).has_pattern(cal.MODERN_STATE)
        assert aggregate_signals(make_signals(10, component_like=4, state_hooks=5)).has_pattern(cal.MODERN_STATE)

    def test_modularity_trend(self, make_signals):
        assert not aggregate_signals(make_signals(10, component_like=2, state_hooks=3)).has_trend(
            cal.INCREASING_MODULARITY
        )
        assert aggregate_signals(make_signals(10, component_like=2, state_hooks=4)).has_trend(
            cal.INCREASING_MODULARITY
        )

    def test_modularity_with_zero_components(self, make_signals):
        assert aggregate_signals(make_signals(5, state_hooks=2)).has_trend(cal.INCREASING_MODULARITY)

    def test_excellent_typed_trend(self, make_signals):
        assert not aggregate_signals(make_signals(10, typed_source=8, test_files=5)).has_trend(
            cal.EXCELLENT_TYPED_ADOPTION
        )
        assert aggregate_signals(make_signals(10, typed_source=9, test_files=5)).has_trend(
            cal.EXCELLENT_TYPED_ADOPTION
        )

    def test_low_test_coverage_trend(self, make_signals):
        assert aggregate_signals(make_signals(10, test_files=2)).has_trend(cal.LOW_TEST_COVERAGE)
        assert not aggregate_signals(make_signals(10, test_files=3)).has_trend(cal.LOW_TEST_COVERAGE)

    def test_trends_keep_declaration_order(self, make_signals):
        aggregate = aggregate_signals(make_signals(10, component_like=1, state_hooks=2, typed_source=9))
        assert aggregate.trends == (
            cal.INCREASING_MODULARITY,
            cal.EXCELLENT_TYPED_ADOPTION,
            cal.LOW_TEST_COVERAGE,
        )

    def test_large_mixed_project(self, make_signals):
        signals = make_signals(60, component_like=40, state_hooks=50, typed_source=45, test_files=5)
        aggregate = aggregate_signals(signals)

        assert aggregate.complexity is ComplexityTier.HIGH
        assert aggregate.patterns == {
            cal.FUNCTIONAL_COMPONENTS: True,
            cal.TYPED_SOURCE: True,
            cal.MODERN_STATE: True,
        }
        assert aggregate.trends == (cal.LOW_TEST_COVERAGE,)

    def test_visitation_order_does_not_matter(self, make_signals):
        signals = make_signals(30, component_like=12, state_hooks=20, typed_source=25, utility_styling=9)
        assert aggregate_signals(signals) == aggregate_signals(list(reversed(signals)))

    def test_explicit_total(self, make_signals):
        aggregate = aggregate_signals(make_signals(5, typed_source=5), total=30)
        assert aggregate.counts.total == 30
        assert aggregate.complexity is ComplexityTier.MEDIUM
        assert not aggregate.has_pattern(cal.TYPED_SOURCE)


class TestCounts:
    """Test count_signals and payload export."""

    def test_counts(self, make_signals):
        counts = count_signals(make_signals(8, component_like=3, state_hooks=2, test_files=1))
        assert counts.total == 8
        assert counts.component_like == 3
        assert counts.state_hooks == 2
        assert counts.test_files == 1

    def test_payload_is_plain_data(self, make_signals):
        payload = aggregate_signals(make_signals(60, component_like=10)).to_payload()
        assert payload["complexity"] == "high"
        assert payload["counts"]["component_like"] == 10
        assert isinstance(payload["trends"], list)
