"""Optimization rule table."""

from __future__ import annotations

from ..aggregation.models import ComplexityTier, ProjectAggregate
from .. import calibration as cal
from .engine import evaluate_rules
from .models import ComplexityIs, Level, Optimization, OptimizationType, PatternPresent, Rule

OPTIMIZATION_RULES: tuple[Rule[Optimization], ...] = (
    Rule(
        name="memoize-components",
        when=(PatternPresent(cal.FUNCTIONAL_COMPONENTS),),
        result=Optimization(
            type=OptimizationType.PERFORMANCE,
            description="Memoize frequently re-rendering components",
            impact=Level.MEDIUM,
            effort=Level.LOW,
        ),
    ),
    Rule(
        name="memoize-computations",
        when=(PatternPresent(cal.MODERN_STATE),),
        result=Optimization(
            type=OptimizationType.PERFORMANCE,
            description="Memoize expensive computations and callbacks",
            impact=Level.HIGH,
            effort=Level.MEDIUM,
        ),
    ),
    Rule(
        name="modular-decomposition",
        when=(ComplexityIs(ComplexityTier.HIGH),),
        result=Optimization(
            type=OptimizationType.ARCHITECTURE,
            description="Evaluate a modular or federated decomposition",
            impact=Level.HIGH,
            effort=Level.HIGH,
        ),
    ),
    Rule(
        name="purge-utility-classes",
        when=(PatternPresent(cal.UTILITY_STYLING),),
        result=Optimization(
            type=OptimizationType.BUNDLE,
            description="Enable production purge of unused utility classes",
            impact=Level.MEDIUM,
            effort=Level.LOW,
        ),
    ),
)


def suggest_optimizations(aggregate: ProjectAggregate) -> list[Optimization]:
    """Run the optimization table against an aggregate."""
    return evaluate_rules(OPTIMIZATION_RULES, aggregate)
