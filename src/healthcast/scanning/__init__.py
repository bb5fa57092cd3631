"""File-system enumeration for scans."""

from .discovery import discover_source_files, find_empty_directories

__all__ = ["discover_source_files", "find_empty_directories"]
