"""Configuration loading and management for healthcast.

This module provides configuration discovery and validation. Configuration
sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.healthcast.toml)
    3. Project config (./healthcast.toml)
    4. Explicit config file
    5. Environment variables (HEALTHCAST_* prefix)
    6. Keyword overrides (typically CLI flags)

The calibration constants used by the pattern aggregator and score
compiler are deliberately NOT configurable; see ``healthcast.calibration``.

Example:
    >>> config = load_config(verbose=True, workers=4)
    >>> config.verbosity
    'verbose'
    >>> config.workers
    4
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError

Verbosity = Literal["quiet", "normal", "verbose"]
SourceKind = Literal["static", "service"]

CONFIG_FILENAME = "healthcast.toml"
ENV_PREFIX = "HEALTHCAST_"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a scan.

    Attributes:
        File selection:
            include_extensions: Source extensions considered candidate files
            exclude_dirs: Directory names pruned anywhere in the tree
            exclude_patterns: Glob patterns (matched with ``Path.match``) to skip

        Resource limits:
            max_file_size_mb: Files larger than this are skipped
            max_files: Upper bound on candidate files

        Execution:
            workers: Thread pool size for signal extraction (None = sequential)
            prediction_source: "static" rule tables or "service" client

        Output control:
            verbosity: Logging verbosity level

        Security:
            allow_hidden_files: Include hidden files (starting with .)
            follow_symlinks: Follow symbolic links during scanning
    """

    include_extensions: tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx")
    exclude_dirs: tuple[str, ...] = (
        "node_modules",
        ".git",
        "dist",
        "build",
        "out",
        "coverage",
        ".next",
        ".vscode-test",
    )
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            "*.min.js",
            "*.bundle.js",
            "*.d.ts",
            "*.generated.*",
        ]
    )

    max_file_size_mb: float = 10.0
    max_files: int = 10000

    workers: Optional[int] = None
    prediction_source: SourceKind = "static"

    verbosity: Verbosity = "normal"

    allow_hidden_files: bool = False
    follow_symlinks: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.include_extensions:
            raise ValueError("include_extensions must not be empty")
        for ext in self.include_extensions:
            if not ext.startswith("."):
                raise ValueError(f"extension {ext!r} must start with '.'")

        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")
        if self.max_files < 1:
            raise ValueError("max_files must be at least 1")

        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be at least 1")

        if self.prediction_source not in ("static", "service"):
            raise ValueError("prediction_source must be 'static' or 'service'")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of quiet, normal, verbose")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are folded into ``verbosity``; ``None``
            values are ignored so unset CLI options keep lower layers.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a
            value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_section(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_section(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_section(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    # TOML arrays arrive as lists
    for key in ("include_extensions", "exclude_dirs"):
        if key in merged and isinstance(merged[key], list):
            merged[key] = tuple(merged[key])

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration value: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from HEALTHCAST_* environment variables.

    Supported environment variables:
        HEALTHCAST_MAX_FILE_SIZE_MB: float
        HEALTHCAST_MAX_FILES: int
        HEALTHCAST_WORKERS: int
        HEALTHCAST_PREDICTION_SOURCE: static/service
        HEALTHCAST_VERBOSITY: quiet/normal/verbose
        HEALTHCAST_ALLOW_HIDDEN_FILES: bool
        HEALTHCAST_FOLLOW_SYMLINKS: bool

    Returns:
        Dict of field_name -> parsed_value for any HEALTHCAST_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Args:
        value: Raw string from environment
        type_hint: Type annotation from dataclass

    Returns:
        Parsed value or None if the field can't be set from the environment

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    # Sequences are too awkward for env vars
    if origin in (list, tuple) or type_hint in (list, tuple):
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_section(path: Path) -> dict:
    """Load a TOML config file, accepting either a flat table or ``[healthcast]``."""
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("healthcast", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [healthcast] must be a table")
    return dict(section)


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
