"""Analysis-related exceptions: file access, rule tables, service payloads."""

from pathlib import Path
from typing import Union

from .base import HealthcastError


class AnalysisError(HealthcastError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Union[Path, str], reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class RuleConfigurationError(AnalysisError):
    """Raised when a rule table references something that does not exist.

    This is a programming defect in the rule tables, never a runtime
    condition of the scanned project, so it is always propagated.
    """

    def __init__(self, rule: str, reason: str):
        super().__init__(
            f"Malformed rule: {rule}",
            details={"rule": rule, "reason": reason},
        )
        self.rule = rule
        self.reason = reason


class ServiceResponseError(AnalysisError):
    """Raised when the prediction service returns an unusable record."""

    def __init__(self, reason: str):
        super().__init__(
            "Prediction service returned an invalid response",
            details={"reason": reason},
        )
        self.reason = reason
