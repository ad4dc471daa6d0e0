"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures for testing core functionality,
such as the no-op progress display and mock file reader factories. Model
factories shared with the UI tests live in the top-level tests/conftest.py.
"""

from pathlib import Path

import pytest

from ui.progress_display import NoOpProgressDisplay


@pytest.fixture
def progress_display():
    """Progress display for testing."""
    return NoOpProgressDisplay()


@pytest.fixture
def mock_file_reader_factory():
    """Factory for creating MockFileReader instances with file content mappings."""

    def _factory(file_contents: dict[str, str]):
        """
        Create a MockFileReader configured with file content mappings.

        Args:
            file_contents: Dictionary mapping file names to their content.
                Keys are file names (e.g., "index.html.erb"), values are file content strings.
        """
        from core.file_io import MockFileReader

        def read_file_side_effect(path: Path) -> str:
            return file_contents.get(path.name, "")

        return MockFileReader(read_file_fn=read_file_side_effect)

    return _factory
