"""
Project tree adapter for file discovery operations.

This module locates the two kinds of input files a scan needs inside a Rails
project: controller modules and view templates. Discovery is purely structural
(directory + file name conventions from a `ProjectLayout`); no file is opened
here.

Paths are yielded in sorted order so that binding ids, which are assigned in
discovery order, are identical from one run to the next.
"""

from pathlib import Path
from typing import Generator

from constants import DEFAULT_LAYOUT
from models import ProjectLayout


class ProjectTree:
    """
    File discovery over one project root.

    Attributes:
        root: The project root all layout directories are resolved against.
        layout: Directory and naming conventions to apply.
    """

    def __init__(self, root: Path, layout: ProjectLayout = DEFAULT_LAYOUT):
        self.root = root
        self.layout = layout

    @property
    def controllers_dir(self) -> Path:
        return self.root / self.layout["controllers_dir"]

    @property
    def views_dir(self) -> Path:
        return self.root / self.layout["views_dir"]

    def stream_controller_paths(self) -> Generator[Path, None, None]:
        """
        Lazily yield controller module files in ascending path order.

        A file qualifies when it lives anywhere below the controllers
        directory, its stem ends with the controller suffix, and its extension
        is one of the controller extensions.

        Yields:
            Path: Absolute path of each controller file.
        """
        suffix = self.layout["controller_suffix"]
        extensions = self.layout["controller_extensions"]

        for path in self._sorted_files(self.controllers_dir):
            if path.suffix in extensions and path.stem.endswith(suffix):
                yield path

    def stream_template_paths(self) -> Generator[Path, None, None]:
        """
        Lazily yield view templates in ascending path order.

        Yields:
            Path: Absolute path of each file below the views directory whose
                name ends with the template extension.
        """
        extension = self.layout["template_extension"]

        for path in self._sorted_files(self.views_dir):
            if path.name.endswith(extension):
                yield path

    def relative(self, path: Path) -> str:
        """Path relative to the root, with forward slashes on every platform."""
        return path.relative_to(self.root).as_posix()

    def _sorted_files(self, directory: Path) -> list[Path]:
        if not directory.is_dir():
            return []
        return sorted(
            (p for p in directory.rglob("*") if p.is_file()),
            key=lambda p: p.relative_to(self.root).as_posix(),
        )
