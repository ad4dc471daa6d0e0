"""
Type definitions and data models used across the stimulus-viz CLI application.

This module contains shared type definitions including enums and TypedDict
structures that are used throughout the codebase for type safety and consistency.
"""

from enum import StrEnum
from typing import TypedDict


class LintLevel(StrEnum):
    """
    Severity of a lint finding, in ascending order of seriousness.

    Only INFO and WARN are produced by the current rule set. ERROR is reserved
    for future rules but is accepted everywhere a level is read back.
    """

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class FailOnLevel(StrEnum):
    """
    Threshold passed to `lint --fail-on`.

    NONE disables failure entirely; every other member mirrors a LintLevel.
    """

    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    NONE = "none"


class ExportFormat(StrEnum):
    JSON = "json"
    DOT = "dot"


class ProjectLayout(TypedDict):
    """
    Type definition for the directory conventions of a scanned project.

    Attributes:
        controllers_dir: Directory (relative to the project root) holding the
            controller modules, searched recursively.
        controller_suffix: Suffix a controller file stem must end with
            (e.g. "_controller" for "hello_controller.js").
        controller_extensions: A frozen set of accepted controller extensions.
        views_dir: Directory (relative to the project root) holding templates,
            searched recursively.
        template_extension: Extension a template file must end with.
    """

    controllers_dir: str
    controller_suffix: str
    controller_extensions: frozenset[str]
    views_dir: str
    template_extension: str
