"""Prediction source backed by an external service client.

The client is anything implementing ``PredictionClient``. It receives the
aggregate's plain-data payload (never file contents) and returns plain
records, which are validated here before they reach the score compiler.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Protocol, Sequence

from ..aggregation.models import ProjectAggregate
from ..exceptions import ServiceResponseError
from ..logging_config import get_logger
from ..rules.models import IssueType, Level, Optimization, OptimizationType, Prediction, Severity
from .base import PredictionSource

logger = get_logger(__name__)


class PredictionClient(Protocol):
    def predict_issues(self, payload: Dict[str, Any]) -> Sequence[Mapping[str, Any]]: ...

    def suggest_optimizations(self, payload: Dict[str, Any]) -> Sequence[Mapping[str, Any]]: ...


class ServicePredictionSource(PredictionSource):
    """Delegates to an external prediction service."""

    name = "service"

    def __init__(self, client: PredictionClient):
        self.client = client

    def predict(self, aggregate: ProjectAggregate) -> List[Prediction]:
        records = self.client.predict_issues(aggregate.to_payload())
        predictions = [parse_prediction(record) for record in _as_list(records)]
        logger.debug(f"Service returned {len(predictions)} predictions")
        return predictions

    def optimize(self, aggregate: ProjectAggregate) -> List[Optimization]:
        records = self.client.suggest_optimizations(aggregate.to_payload())
        optimizations = [parse_optimization(record) for record in _as_list(records)]
        logger.debug(f"Service returned {len(optimizations)} optimizations")
        return optimizations


def parse_prediction(record: Mapping[str, Any]) -> Prediction:
    """Build a Prediction from a service record.

    ``confidence`` may be an integer percentage or a fraction in [0, 1].

    Raises:
        ServiceResponseError: If a field is missing or out of range
    """
    if not isinstance(record, Mapping):
        raise ServiceResponseError(f"expected an object, got {type(record).__name__}")
    try:
        message = str(record["message"])
        return Prediction(
            type=IssueType(record["type"]),
            message=message,
            description=str(record.get("description", message)),
            severity=Severity(record["severity"]),
            confidence=_parse_confidence(record["confidence"]),
            suggested_action=str(record.get("suggested_action", record.get("suggestedAction", ""))),
        )
    except KeyError as e:
        raise ServiceResponseError(f"prediction is missing field {e.args[0]!r}")
    except (TypeError, ValueError) as e:
        raise ServiceResponseError(f"invalid prediction: {e}")


def parse_optimization(record: Mapping[str, Any]) -> Optimization:
    """Build an Optimization from a service record.

    Raises:
        ServiceResponseError: If a field is missing or not a known value
    """
    if not isinstance(record, Mapping):
        raise ServiceResponseError(f"expected an object, got {type(record).__name__}")
    try:
        return Optimization(
            type=OptimizationType(record["type"]),
            description=str(record["description"]),
            impact=Level(record["impact"]),
            effort=Level(record["effort"]),
        )
    except KeyError as e:
        raise ServiceResponseError(f"optimization is missing field {e.args[0]!r}")
    except ValueError as e:
        raise ServiceResponseError(f"invalid optimization: {e}")


def _parse_confidence(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"confidence must be numeric, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"confidence must be finite, got {value!r}")
    if isinstance(value, float) and 0.0 <= value <= 1.0:
        return round(value * 100)
    return int(value)


def _as_list(records: Any) -> list:
    if records is None:
        return []
    if isinstance(records, (str, bytes, Mapping)):
        raise ServiceResponseError(f"expected a list of records, got {type(records).__name__}")
    return list(records)
