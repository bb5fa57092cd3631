"""The predictive health pipeline.

    extract (fan-out per file) -> aggregate (fan-in) -> predict + optimize -> compile

Only extraction touches file contents; every later stage sees nothing but
the ProjectAggregate, so the report does not depend on visitation order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .aggregation import ProjectAggregate, aggregate_signals
from .logging_config import get_logger
from .scoring import Report, compile_report
from .signals import ExtractionResult, SignalExtractor
from .signals.extractor import PathLike, ReadFile
from .sources import PredictionSource, StaticPredictionSource

logger = get_logger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Report plus the intermediate products, for callers that display them."""

    report: Report
    aggregate: ProjectAggregate
    extraction: ExtractionResult


class HealthPipeline:
    """Runs one scan. The prediction source is fixed at construction."""

    def __init__(self, source: Optional[PredictionSource] = None, workers: Optional[int] = None):
        self.source = source if source is not None else StaticPredictionSource()
        self.extractor = SignalExtractor(workers=workers)

    def run_detailed(self, paths: Sequence[PathLike], read_file: ReadFile) -> PipelineResult:
        extraction = self.extractor.extract_all(paths, read_file)
        aggregate = aggregate_signals(extraction.signals, total=extraction.scanned)
        logger.debug(
            f"Aggregated {extraction.scanned} files: complexity={aggregate.complexity.value}, "
            f"patterns={sorted(aggregate.patterns)}, trends={list(aggregate.trends)}"
        )

        issues = self.source.predict(aggregate)
        optimizations = self.source.optimize(aggregate)
        report = compile_report(issues, optimizations)
        logger.info(
            f"Predictive analysis ({self.source.name}): score={report.score}, "
            f"{len(report.issues)} issues, {len(report.optimizations)} optimizations"
        )
        return PipelineResult(report=report, aggregate=aggregate, extraction=extraction)

    def run(self, paths: Sequence[PathLike], read_file: ReadFile) -> Report:
        return self.run_detailed(paths, read_file).report
