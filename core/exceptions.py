"""
Custom exception classes for the stimulus-viz CLI.

This module defines application-specific exceptions that are raised while
reading project sources, writing output files, and loading the scan cache.
These exceptions provide structured error information and diagnostic data
to help with debugging and error reporting.

Attribute extraction never raises: malformed markup degrades to "no match".
Only I/O problems and an absent or corrupt cache surface as exceptions.
"""

import os
from pathlib import Path
from typing import Optional


class FileIOError(Exception):
    """
    Base exception for file read/write errors.

    Attributes:
        message: A human-readable error message describing what went wrong.
        file_path: The path of the file involved, if known.
        original_exception: The underlying exception that caused this error, if any.
        diagnostic_info: A dictionary containing diagnostic information including
            exception type, details, and OS name.
    """

    default_message = "A file operation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.file_path = file_path
        self.original_exception = original_exception
        self.diagnostic_info = {
            "type": (
                type(original_exception).__name__ if original_exception else "Unknown"
            ),
            "details": str(original_exception) if original_exception else "No details",
            "os_name": os.name,
        }


class FileReadError(FileIOError):
    """
    Raised when a discovered source file cannot be read as UTF-8 text.

    A scan never continues past this error: the whole run fails so that a
    cache is never written from a partial view of the project.
    """

    default_message = "Failed to read file"


class FileWriteError(FileIOError):
    """Raised when the cache or an export file cannot be written."""

    default_message = "Failed to write file"


class InvalidFilePathError(FileIOError):
    """Raised when an output path cannot possibly be written (missing or read-only parent)."""

    default_message = "Invalid file path"


class CacheError(Exception):
    """
    Base exception for problems with the persisted scan result.

    Attributes:
        message: A human-readable error message.
        cache_path: Path of the cache file that was requested.
    """

    def __init__(self, cache_path: Path, message: Optional[str] = None):
        self.cache_path = cache_path
        self.message = message or f"Cache file problem: {cache_path}"
        super().__init__(self.message)


class CacheNotFoundError(CacheError):
    """Raised when a command needs the cache but `scan` has not produced it."""

    def __init__(self, cache_path: Path, message: Optional[str] = None):
        super().__init__(
            cache_path, message or f"Cache file not found: {cache_path}"
        )


class CacheFormatError(CacheError):
    """Raised when the cache file is not JSON or lacks the expected structure."""

    def __init__(self, cache_path: Path, message: Optional[str] = None):
        super().__init__(cache_path, message or f"Invalid cache file: {cache_path}")
