"""PredictionSource interface."""

from abc import ABC, abstractmethod
from typing import List

from ..aggregation.models import ProjectAggregate
from ..rules.models import Optimization, Prediction


class PredictionSource(ABC):
    """Produces predictions and optimizations for a project aggregate.

    A source is chosen once when the pipeline is built; callers never probe
    a source for optional capabilities.
    """

    name: str = "base"

    @abstractmethod
    def predict(self, aggregate: ProjectAggregate) -> List[Prediction]:
        """Return predicted issues for the aggregate."""

    @abstractmethod
    def optimize(self, aggregate: ProjectAggregate) -> List[Optimization]:
        """Return suggested optimizations for the aggregate."""
