"""Tests for the healthcast exception hierarchy."""

import pytest

from healthcast.exceptions import (
    AnalysisError,
    ConfigurationError,
    FileAccessError,
    HealthcastError,
    InvalidConfigError,
    InvalidPathError,
    RuleConfigurationError,
    SecurityError,
    ServiceResponseError,
)


class TestHierarchy:
    """Every error is catchable as HealthcastError."""

    @pytest.mark.parametrize(
        "error",
        [
            FileAccessError("a.ts", "gone"),
            RuleConfigurationError("r", "bad"),
            ServiceResponseError("bad"),
            InvalidPathError("x", "missing"),
            InvalidConfigError("workers", 0, "too small"),
            SecurityError("nope"),
        ],
    )
    def test_base_class(self, error):
        assert isinstance(error, HealthcastError)

    def test_analysis_branch(self):
        assert issubclass(FileAccessError, AnalysisError)
        assert issubclass(RuleConfigurationError, AnalysisError)
        assert issubclass(ServiceResponseError, AnalysisError)

    def test_configuration_branch(self):
        assert issubclass(InvalidPathError, ConfigurationError)
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(SecurityError, ConfigurationError)


class TestMessages:
    """String form includes details."""

    def test_plain_message(self):
        assert str(HealthcastError("boom")) == "boom"

    def test_details_are_appended(self):
        error = FileAccessError("src/a.ts", "permission denied")
        assert str(error) == "Cannot access file: src/a.ts (filepath=src/a.ts, reason=permission denied)"
        assert error.reason == "permission denied"

    def test_rule_error_fields(self):
        error = RuleConfigurationError("large-bundle", "undefined pattern 'perf'")
        assert error.rule == "large-bundle"
        assert error.details == {"rule": "large-bundle", "reason": "undefined pattern 'perf'"}

    def test_security_error_without_path(self):
        error = SecurityError("too many files")
        assert error.filepath is None
        assert "filepath" not in error.details
