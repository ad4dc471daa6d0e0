"""
Controller inventory: derives controller identities from module file names.

Controller files are never read. A file named `message_form_controller.js`
declares the controller `message-form`: the extension and the fixed suffix are
stripped and underscores become dashes. Entries with colliding names are kept
side by side; cross-referencing only ever compares names.
"""

from pathlib import PurePath
from typing import Iterable

from constants import DEFAULT_LAYOUT
from core.models import ControllerDescriptor


def controller_name_from_path(
    file_path: PurePath, suffix: str = DEFAULT_LAYOUT["controller_suffix"]
) -> str:
    """
    Canonical controller name for a controller module path.

    Examples:
        >>> controller_name_from_path(PurePath("message_form_controller.js"))
        'message-form'
        >>> controller_name_from_path(PurePath("admin/users_controller.ts"))
        'users'
    """
    stem = file_path.stem
    if suffix and stem.endswith(suffix):
        stem = stem[: -len(suffix)]
    return stem.replace("_", "-")


def build_inventory(
    relative_paths: Iterable[str],
    suffix: str = DEFAULT_LAYOUT["controller_suffix"],
) -> list[ControllerDescriptor]:
    """
    Build one ControllerDescriptor per discovered controller file.

    Args:
        relative_paths: Controller module paths relative to the project root,
            in discovery order.
        suffix: Suffix stripped from each file stem.

    Returns:
        list[ControllerDescriptor]: Descriptors in the same order as the input.
    """
    return [
        ControllerDescriptor(controller_name_from_path(PurePath(p), suffix), p)
        for p in relative_paths
    ]
