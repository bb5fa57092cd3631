"""Calibration constants and the pattern/trend vocabulary.

These values were tuned by hand and have no documented derivation. They
are kept verbatim so that a given file set always produces the same
report; do not adjust them without product guidance.

Pattern and trend keys are defined here once. The rule tables reference
them by these names, and the rule engine rejects any key that is not in
``KNOWN_PATTERNS`` / ``KNOWN_TRENDS``.
"""

# === Pattern aggregation ===
COMPONENT_IDIOM_MIN_COUNT = 5  # strictly more than this many component-like files
TYPED_ADOPTION_RATIO = 0.7  # of N
UTILITY_STYLING_RATIO = 0.5  # of component-like count
MODULARITY_HOOK_RATIO = 1.5  # hooks per component-like file
EXCELLENT_TYPED_RATIO = 0.8  # of N
LOW_TEST_COVERAGE_RATIO = 0.3  # of N

# === Complexity tiers (total scanned files) ===
COMPLEXITY_MEDIUM_ABOVE = 20
COMPLEXITY_HIGH_ABOVE = 50

# === Score compilation ===
SCORE_MAX = 100
SCORE_MIN = 0
HIGH_SEVERITY_PENALTY = 15
PER_ISSUE_PENALTY = 5

TREND_EXCELLENT_MIN = 85
TREND_GOOD_MIN = 70
TREND_IMPROVING_MIN = 50

# === Pattern keys ===
FUNCTIONAL_COMPONENTS = "functional-component idiom"
TYPED_SOURCE = "strong typed-source adoption"
UTILITY_STYLING = "utility-styling adoption"
MODERN_STATE = "modern state-management idiom"
# Never produced by the aggregator; rules may test for its absence.
PERFORMANCE_OPTIMIZATION = "performance optimization"

KNOWN_PATTERNS = frozenset(
    {
        FUNCTIONAL_COMPONENTS,
        TYPED_SOURCE,
        UTILITY_STYLING,
        MODERN_STATE,
        PERFORMANCE_OPTIMIZATION,
    }
)

# === Trend statements ===
INCREASING_MODULARITY = "increasing modularity"
EXCELLENT_TYPED_ADOPTION = "excellent typed-source adoption"
LOW_TEST_COVERAGE = "low test coverage"

KNOWN_TRENDS = frozenset(
    {
        INCREASING_MODULARITY,
        EXCELLENT_TYPED_ADOPTION,
        LOW_TEST_COVERAGE,
    }
)
