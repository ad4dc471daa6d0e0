import os
from pathlib import Path
from typing import Callable, Protocol

from core.exceptions import (
    FileReadError,
    FileWriteError,
    InvalidFilePathError,
)


class FileReader(Protocol):
    """
    Protocol defining the interface for file reading operations.

    This protocol specifies methods for reading files, allowing different
    implementations for production (filesystem) and testing (mocks).
    """

    def read_file(self, file_path: Path) -> str:
        """
        Read the full text content of a file as UTF-8.

        Args:
            file_path: The path to the file to read.

        Returns:
            The file content as a string.

        Raises:
            FileReadError: If the file is missing, unreadable or not valid UTF-8.
        """


class FileWriter(Protocol):
    """
    Protocol defining the interface for file writing operations.

    This protocol specifies methods for writing data to files, allowing different
    implementations for production (filesystem) and testing (mocks).
    """

    def write_file(self, data: str, mode: str = "w") -> None:
        """
        Write data to a file.

        Args:
            data: String data to write.
            mode: File mode ("w" for write/truncate, "a" for append). Defaults to "w".
        """


class FilesystemFileReader:

    def read_file(self, file_path: Path) -> str:
        """
        Read the full text content of a file as UTF-8.

        Sources are read in one go, strictly decoded. There is no fallback for
        missing or undecodable files: a scan built on a partially read tree
        would silently drop bindings.

        Args:
            file_path: The path to the file to read.

        Returns:
            The file content as a string.

        Raises:
            FileReadError: If the file does not exist, cannot be read, or is not
                valid UTF-8.
        """
        if not file_path.is_file():
            raise FileReadError(
                message=f"File not found: {file_path}",
                file_path=str(file_path),
            )

        try:
            with file_path.open("r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(
                message=f"Failed to read file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e


class FilesystemFileWriter:
    def __init__(self, file_path: Path | None = None):
        self.file_path = file_path

    @classmethod
    def from_path(cls, file_path: Path) -> "FilesystemFileWriter":
        """
        Create a writer instance with an explicit file path.

        Args:
            file_path: The path to the file to manage.

        Returns:
            FilesystemFileWriter instance configured for the given path.

        Raises:
            InvalidFilePathError: If file_path is invalid (e.g., parent directory
                doesn't exist or is not writable).
        """
        parent = file_path.parent
        if not parent.exists():
            raise InvalidFilePathError(
                message=f"Parent directory does not exist: {parent}",
                file_path=str(file_path),
            )
        if not os.access(parent, os.W_OK):
            raise InvalidFilePathError(
                message=f"Parent directory is not writable: {parent}",
                file_path=str(file_path),
            )

        return cls(file_path)

    def write_file(self, data: str, mode: str = "w") -> None:
        """
        Writes data to the output file.

        Args:
            data: String data to write
            mode: File mode ("w" for write/truncate, "a" for append)

        Raises:
            InvalidFilePathError: If file path is not set.
            FileWriteError: If writing to the file fails.
        """
        if self.file_path is None:
            raise InvalidFilePathError("No file path set. Use a factory method first.")

        try:
            with open(self.file_path, mode, encoding="utf-8") as f:
                f.write(data)
        except OSError as e:
            raise FileWriteError(
                message=f"Failed to write to file: {self.file_path}",
                file_path=str(self.file_path),
                original_exception=e,
            ) from e


class MockFileReader:
    """
    Mock implementation of FileReader for testing.

    Returns configurable file contents, allowing tests to control file reading
    behavior without requiring filesystem operations or actual file I/O.
    """

    def __init__(
        self,
        return_value: str | None = None,
        read_file_fn: Callable[[Path], str] | None = None,
    ):
        """
        Initialize MockFileReader with configurable reading behavior.

        Args:
            return_value: If provided, always returns this value regardless of input.
                Takes precedence over read_file_fn if both are provided.
            read_file_fn: Optional callable that takes a file path and returns file content.
                It may raise FileReadError to simulate an unreadable file.

        Attributes (for test inspection):
            read_file_calls: List of file paths passed to read_file()
        """
        self.return_value = return_value
        self.read_file_fn = read_file_fn

        self.read_file_calls: list[Path] = []

    def read_file(self, file_path: Path) -> str:
        self.read_file_calls.append(file_path)
        if self.return_value is not None:
            return self.return_value
        if self.read_file_fn is not None:
            return self.read_file_fn(file_path)
        return ""


class MockFileWriter:
    """
    Mock implementation of FileWriter for testing.

    Tracks all write calls and keeps the resulting content, allowing tests to
    inspect what would have been written without touching the filesystem.

    Attributes (for test inspection):
        write_file_calls: List of tuples (data, mode) passed to write_file()
        written_data: The content the file would hold after all calls.
    """

    def __init__(self) -> None:
        self.write_file_calls: list[tuple[str, str]] = []
        self.written_data: str = ""

    def write_file(self, data: str, mode: str = "w") -> None:
        self.write_file_calls.append((data, mode))
        if mode == "w":
            self.written_data = data
        else:
            self.written_data += data
