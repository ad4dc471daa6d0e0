"""
Turns scanned element spans into Binding records.
"""

from constants import BINDING_ID_FORMAT, SELECTOR_PREFIX_LENGTH
from core.attributes import (
    extract_actions,
    extract_controllers,
    extract_element_id,
    extract_targets,
    extract_values,
)
from core.models import Binding


def format_binding_id(number: int) -> str:
    return BINDING_ID_FORMAT % number


def build_selector(tag: str, file_path: str, line_number: int) -> str:
    """
    Build the human-readable locator for an element.

    Format: "<file>:<line> <PREFIX...#id>" where PREFIX is the tag text right
    after "<", cut to a fixed length, and "#id" is only present when the
    element has an `id` attribute.

    Example:
        >>> build_selector('<div id="menu" data-controller="menu">', "app/views/a.html.erb", 3)
        'app/views/a.html.erb:3 <div id="menu" data-c...#menu>'
    """
    element_id = extract_element_id(tag)
    suffix = f"#{element_id}" if element_id else ""
    prefix = tag[1 : SELECTOR_PREFIX_LENGTH + 1]
    return f"{file_path}:{line_number} <{prefix}...{suffix}>"


def synthesize_binding(
    tag: str, binding_id: str, file_path: str, line_number: int
) -> Binding:
    """
    Decode every attribute family of one element into a Binding.

    A Binding is produced for every span the tag scanner emits, even when all
    decoded lists come back empty: the element still carried a binding marker.

    Args:
        tag: Raw opening-tag text.
        binding_id: Identifier allocated by the scan for this element.
        file_path: Template path relative to the project root.
        line_number: 1-based line of the element's "<".

    Returns:
        Binding: The decoded element. Its `broken` flag follows from the lists.
    """
    return Binding(
        id=binding_id,
        selector=build_selector(tag, file_path, line_number),
        controllers=extract_controllers(tag),
        actions=extract_actions(tag),
        targets=extract_targets(tag),
        values=extract_values(tag),
    )
