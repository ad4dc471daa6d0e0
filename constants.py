"""
Application-wide constants and configuration mappings.

This module defines the fixed conventions used throughout the stimulus-viz CLI:
where controllers and templates live in a Rails project, how binding attributes
are recognised, how bindings are identified, and the wording of lint findings.
"""

from typing import Final
from models import ProjectLayout


# Directory conventions of a standard Rails + Stimulus project.
# Controllers are discovered from their file names only; templates are read in
# full and scanned for elements carrying binding attributes.
DEFAULT_LAYOUT: Final[ProjectLayout] = {
    "controllers_dir": "app/javascript/controllers",
    "controller_suffix": "_controller",
    "controller_extensions": frozenset({".js", ".ts"}),
    "views_dir": "app/views",
    "template_extension": ".erb",
}

# Every binding attribute family (controller, action, target, value) shares
# this prefix. A tag without it is never turned into a binding.
BINDING_MARKER: Final[str] = "data-"

# Cache file written by `scan` and read by every other command.
DEFAULT_CACHE_FILE: Final[str] = ".stimulus-viz.json"

# Bindings are numbered per scan: el_0001, el_0002, ...
BINDING_ID_FORMAT: Final[str] = "el_%04d"

# Number of raw tag characters (after the opening "<") shown in a selector.
SELECTOR_PREFIX_LENGTH: Final[int] = 20

# Lint rule wording. The rule set is closed; titles are matched verbatim by
# consumers of the cache file.
LINT_UNKNOWN_CONTROLLER: Final[str] = "Unknown controller"
LINT_SUSPICIOUS_ACTION: Final[str] = "Suspicious action format"
LINT_EMPTY_BINDING: Final[str] = "Empty binding"

LINT_SUSPICIOUS_ACTION_HINT: Final[str] = (
    "Expected format: 'click->controller#method'"
)
LINT_EMPTY_BINDING_HINT: Final[str] = (
    "Consider adding data-action, targets, or values to make the controller useful"
)
