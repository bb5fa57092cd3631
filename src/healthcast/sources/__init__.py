"""Prediction sources: static rule tables or an external service."""

from typing import Optional

from ..exceptions import InvalidConfigError
from .base import PredictionSource
from .service import PredictionClient, ServicePredictionSource, parse_optimization, parse_prediction
from .static import StaticPredictionSource


def build_prediction_source(kind: str = "static", client: Optional[PredictionClient] = None) -> PredictionSource:
    """Select the prediction source for a pipeline.

    Args:
        kind: "static" or "service"
        client: Required when kind is "service"

    Raises:
        InvalidConfigError: Unknown kind, or "service" without a client
    """
    if kind == "static":
        return StaticPredictionSource()
    if kind == "service":
        if client is None:
            raise InvalidConfigError("prediction_source", kind, "a service client is required")
        return ServicePredictionSource(client)
    raise InvalidConfigError("prediction_source", kind, "expected 'static' or 'service'")


__all__ = [
    "PredictionSource",
    "PredictionClient",
    "StaticPredictionSource",
    "ServicePredictionSource",
    "build_prediction_source",
    "parse_prediction",
    "parse_optimization",
]
