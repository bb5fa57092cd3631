"""Rule-table backed prediction source."""

from typing import List

from ..aggregation.models import ProjectAggregate
from ..rules.models import Optimization, Prediction
from ..rules.optimizations import suggest_optimizations
from ..rules.predictions import predict_issues
from .base import PredictionSource


class StaticPredictionSource(PredictionSource):
    """Evaluates the built-in rule tables. Deterministic."""

    name = "static"

    def predict(self, aggregate: ProjectAggregate) -> List[Prediction]:
        return predict_issues(aggregate)

    def optimize(self, aggregate: ProjectAggregate) -> List[Optimization]:
        return suggest_optimizations(aggregate)
