"""
Decoders for the four binding attribute families on a single element.

Each extractor receives the raw text of one opening tag and returns decoded
values. They are pure, independent of attribute order, and never raise: an
attribute that does not match its full expected shape is simply left out.

Attribute shapes:
    data-controller="a b"                  -> ["a", "b"]
    data-action="click->a#open"            -> ["click->a#open"]
    data-a-target="menu"                   -> [TargetRef("a", "menu")]
    data-a-targets="menu item"             -> [TargetRef("a", "menu"), TargetRef("a", "item")]
    data-a-fade-ms-value="250"             -> [ValueRef("a", "fadeMs", "250")]

The controller segment of target and value attributes is a single dash-free
token; underscores in it are converted to dashes. Attribute values may use
either quote character and must not be empty.
"""

import re
from typing import Final

from core.models import ActionRef, TargetRef, ValueRef

_QUOTED: Final[str] = r"""["']([^"']+)["']"""

CONTROLLER_ATTRIBUTE: Final[re.Pattern[str]] = re.compile(r"data-controller=" + _QUOTED)
ACTION_ATTRIBUTE: Final[re.Pattern[str]] = re.compile(r"data-action=" + _QUOTED)
TARGET_ATTRIBUTE: Final[re.Pattern[str]] = re.compile(r"data-([^-\s]+)-target=" + _QUOTED)
TARGETS_ATTRIBUTE: Final[re.Pattern[str]] = re.compile(
    r"data-([^-\s]+)-targets=" + _QUOTED
)
VALUE_ATTRIBUTE: Final[re.Pattern[str]] = re.compile(
    r"data-([^-\s]+)-([^-\s]+(?:-[^-\s]+)*)-value=" + _QUOTED
)
ID_ATTRIBUTE: Final[re.Pattern[str]] = re.compile(r"(?:^|\s)id=" + _QUOTED)

# event->controller#method, every segment non-empty and free of "#" and "->"
_SEGMENT: Final[str] = r"(?:(?!->)[^#])+"
ACTION_SHAPE: Final[re.Pattern[str]] = re.compile(
    rf"^(?P<event>{_SEGMENT})->(?P<controller>{_SEGMENT})#(?P<method>{_SEGMENT})$"
)


def split_tokens(value: str) -> list[str]:
    """Split on any whitespace, dropping empty tokens."""
    return value.split()


def normalize_controller_segment(segment: str) -> str:
    return segment.replace("_", "-")


def dash_to_camel(name: str) -> str:
    """
    Convert a dash-separated name to camelCase.

    The first segment is kept as-is; every later segment is capitalized, so its
    first letter is upper-cased and the rest lower-cased. "fade-ms" -> "fadeMs",
    "long-name-example" -> "longNameExample", "api-URL" -> "apiUrl",
    "plain" -> "plain".
    """
    first, *rest = name.split("-")
    return first + "".join(part.capitalize() for part in rest)


def extract_controllers(tag: str) -> list[str]:
    match = CONTROLLER_ATTRIBUTE.search(tag)
    if not match:
        return []
    return split_tokens(match.group(1))


def extract_actions(tag: str) -> list[str]:
    match = ACTION_ATTRIBUTE.search(tag)
    if not match:
        return []
    return split_tokens(match.group(1))


def extract_targets(tag: str) -> list[TargetRef]:
    """
    Decode singular and plural target attributes.

    All singular `-target` declarations come first, in document order, followed
    by one entry per name of each plural `-targets` declaration.
    """
    targets = [
        TargetRef(normalize_controller_segment(controller), name)
        for controller, name in TARGET_ATTRIBUTE.findall(tag)
    ]
    for controller, names in TARGETS_ATTRIBUTE.findall(tag):
        targets.extend(
            TargetRef(normalize_controller_segment(controller), name)
            for name in split_tokens(names)
        )
    return targets


def extract_values(tag: str) -> list[ValueRef]:
    return [
        ValueRef(normalize_controller_segment(controller), dash_to_camel(name), raw)
        for controller, name, raw in VALUE_ATTRIBUTE.findall(tag)
    ]


def extract_element_id(tag: str) -> str | None:
    """Return the value of a standalone `id` attribute, ignoring `data-*-id`."""
    match = ID_ATTRIBUTE.search(tag)
    return match.group(1) if match else None


def parse_action(action: str) -> ActionRef | None:
    """
    Parse an action string of the canonical `event->controller#method` shape.

    Returns:
        ActionRef for a well-formed action, or None when the string does not
        match (e.g. "invalid-action-format" or "click->ctrl" without a method).
    """
    match = ACTION_SHAPE.match(action)
    if not match:
        return None
    return ActionRef(match["event"], match["controller"], match["method"])
