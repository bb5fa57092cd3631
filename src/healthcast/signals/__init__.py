"""Per-file signal extraction."""

from .extractor import ExtractionResult, SignalExtractor, extract_signal
from .models import FileSignal

__all__ = [
    "FileSignal",
    "ExtractionResult",
    "SignalExtractor",
    "extract_signal",
]
