"""
Security utilities for healthcast.

Provides root validation, path validation and resource limits.
"""

import os
from pathlib import Path

from .exceptions import InvalidPathError, SecurityError

# System directories that should never be analyzed
SYSTEM_DIRECTORIES = {
    "/etc", "/sys", "/proc", "/dev", "/boot",
    "/bin", "/sbin", "/usr/bin", "/usr/sbin",
    "C:\\Windows", "C:\\Program Files", "C:\\Program Files (x86)",
}

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024

DEFAULT_MAX_FILES = 10000


class PathValidator:
    """
    Validates file paths against a root directory.

    Prevents:
    - Directory traversal
    - Symlink escape
    - Access to hidden files/directories (unless allowed)
    """

    def __init__(self, root_dir: Path, allow_hidden: bool = False):
        self.root_dir = root_dir.resolve()
        self.allow_hidden = allow_hidden

    def validate_path(self, path: Path) -> Path:
        """
        Validate that a path is safe to access.

        Returns:
            Resolved absolute path

        Raises:
            SecurityError: If path fails security checks
            InvalidPathError: If path doesn't exist or isn't accessible
        """
        try:
            resolved_path = path.resolve()
        except (OSError, RuntimeError) as e:
            raise InvalidPathError(path, f"Cannot resolve path: {e}")

        if not resolved_path.exists():
            raise InvalidPathError(resolved_path, "Path does not exist")

        # resolve() follows symlinks, so this also catches symlink escape
        try:
            relative = resolved_path.relative_to(self.root_dir)
        except ValueError:
            raise SecurityError(
                "Path traversal detected: path is outside root directory",
                filepath=resolved_path
            )

        if not self.allow_hidden:
            for part in relative.parts:
                if part.startswith('.') and part not in {'.', '..'}:
                    raise SecurityError(
                        "Access to hidden file/directory blocked",
                        filepath=resolved_path
                    )

        return resolved_path


class ResourceLimiter:
    """
    Enforces resource limits during a scan.
    """

    def __init__(
        self,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
        max_files: int = DEFAULT_MAX_FILES
    ):
        self.max_file_size = max_file_size
        self.max_files = max_files
        self.files_processed = 0

    def check_file_size(self, filepath: Path) -> None:
        """
        Check if file size is within limits.

        Raises:
            SecurityError: If file exceeds size limit
            InvalidPathError: If the file cannot be stat'ed
        """
        try:
            size = filepath.stat().st_size
        except OSError as e:
            raise InvalidPathError(filepath, f"Cannot stat file: {e}")

        if size > self.max_file_size:
            size_mb = size / (1024 * 1024)
            limit_mb = self.max_file_size / (1024 * 1024)
            raise SecurityError(
                f"File size ({size_mb:.2f}MB) exceeds limit ({limit_mb:.2f}MB)",
                filepath=filepath
            )

    def check_file_count(self) -> None:
        """
        Raises:
            SecurityError: If file count exceeds limit
        """
        if self.files_processed > self.max_files:
            raise SecurityError(
                f"File count ({self.files_processed}) exceeds limit ({self.max_files})"
            )

    def increment_file_count(self) -> None:
        """Increment the count of processed files."""
        self.files_processed += 1
        self.check_file_count()


def validate_root_directory(path: Path) -> Path:
    """
    Validate that a root directory is safe to analyze.

    Returns:
        Resolved absolute path

    Raises:
        InvalidPathError: If path is invalid
        SecurityError: If path is unsafe
    """
    try:
        resolved = path.resolve()
    except (OSError, RuntimeError) as e:
        raise InvalidPathError(path, f"Cannot resolve path: {e}")

    if not resolved.exists():
        raise InvalidPathError(resolved, "Directory does not exist")

    if not resolved.is_dir():
        raise InvalidPathError(resolved, "Path is not a directory")

    if not os.access(resolved, os.R_OK):
        raise InvalidPathError(resolved, "Directory is not readable")

    path_str = str(resolved)
    for sys_dir in SYSTEM_DIRECTORIES:
        if path_str == sys_dir or path_str.startswith(sys_dir + os.sep):
            raise SecurityError(
                f"Cannot analyze system directory: {sys_dir}",
                filepath=resolved
            )

    return resolved
