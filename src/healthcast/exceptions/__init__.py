"""Exception hierarchy for healthcast."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    RuleConfigurationError,
    ServiceResponseError,
)
from .base import HealthcastError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    SecurityError,
)

__all__ = [
    "HealthcastError",
    "AnalysisError",
    "FileAccessError",
    "RuleConfigurationError",
    "ServiceResponseError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "SecurityError",
]
