"""
Safe file operations for healthcast.

Provides validated, size-limited file reads. These are the only places the
pipeline touches the disk.
"""

from pathlib import Path
from typing import Optional

from .exceptions import FileAccessError, InvalidPathError, SecurityError
from .security import PathValidator, ResourceLimiter


def safe_read_file(
    filepath: Path,
    validator: Optional[PathValidator] = None,
    limiter: Optional[ResourceLimiter] = None,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> str:
    """
    Safely read a file with security and size checks.

    Args:
        filepath: File to read
        validator: Path validator (if None, skips path validation)
        limiter: Resource limiter (if None, skips size check)
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read or fails a check
    """
    filepath = Path(filepath)
    try:
        if validator:
            filepath = validator.validate_path(filepath)
        if limiter:
            limiter.check_file_size(filepath)
    except (SecurityError, InvalidPathError) as e:
        raise FileAccessError(filepath, e.reason)

    try:
        with open(filepath, encoding=encoding, errors=errors) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def should_skip_file(filepath: Path, exclude_patterns: list[str]) -> bool:
    """
    Check if a file should be skipped based on exclusion patterns.

    Args:
        filepath: File to check
        exclude_patterns: List of glob patterns to exclude

    Returns:
        True if file should be skipped
    """
    for pattern in exclude_patterns:
        if filepath.match(pattern):
            return True
    return False
