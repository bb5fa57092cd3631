"""Generic rule evaluation with up-front table validation."""

from __future__ import annotations

from typing import Sequence

from ..aggregation.models import ComplexityTier, ProjectAggregate
from ..calibration import KNOWN_PATTERNS, KNOWN_TRENDS
from ..exceptions import RuleConfigurationError
from .models import ComplexityIs, PatternAbsent, PatternPresent, R, Rule, TrendPresent


def validate_rules(rules: Sequence[Rule]) -> None:
    """Check that every rule is well-formed.

    Raises:
        RuleConfigurationError: On duplicate names, empty condition lists,
            unknown pattern/trend keys or unknown condition types.
    """
    seen: set[str] = set()
    for rule in rules:
        if not isinstance(rule, Rule):
            raise RuleConfigurationError(repr(rule), "not a Rule")
        if rule.name in seen:
            raise RuleConfigurationError(rule.name, "duplicate rule name")
        seen.add(rule.name)

        if not rule.when:
            raise RuleConfigurationError(rule.name, "rule has no conditions")

        for condition in rule.when:
            if isinstance(condition, (PatternPresent, PatternAbsent)):
                if condition.pattern not in KNOWN_PATTERNS:
                    raise RuleConfigurationError(rule.name, f"undefined pattern {condition.pattern!r}")
            elif isinstance(condition, TrendPresent):
                if condition.trend not in KNOWN_TRENDS:
                    raise RuleConfigurationError(rule.name, f"undefined trend {condition.trend!r}")
            elif isinstance(condition, ComplexityIs):
                if not isinstance(condition.tier, ComplexityTier):
                    raise RuleConfigurationError(rule.name, f"unknown complexity tier {condition.tier!r}")
            else:
                raise RuleConfigurationError(rule.name, f"unknown condition {condition!r}")


def evaluate_rules(rules: Sequence[Rule[R]], aggregate: ProjectAggregate) -> list[R]:
    """Fire every matching rule, in declaration order.

    Rules are independent: none suppresses another, and the output is not
    re-sorted.
    """
    validate_rules(rules)
    return [rule.result for rule in rules if rule.matches(aggregate)]
