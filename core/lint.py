"""
Rule-based lint pass over the controller inventory and the binding set.

The rule set is closed and evaluated per binding, in this order:

1. Unknown controller (warn): a `data-controller` name with no controller file.
2. Suspicious action format (warn): an action not shaped
   `event->controller#method`.
3. Empty binding (info): an element naming a controller with no action,
   target or value.

Findings therefore come out binding by binding, and rule by rule within each
binding. The pass is stateless and never raises.
"""

from typing import Collection, Final

from constants import (
    LINT_EMPTY_BINDING,
    LINT_EMPTY_BINDING_HINT,
    LINT_SUSPICIOUS_ACTION,
    LINT_SUSPICIOUS_ACTION_HINT,
    LINT_UNKNOWN_CONTROLLER,
)
from core.attributes import parse_action
from core.models import Binding, LintFinding
from models import FailOnLevel, LintLevel

LEVEL_ORDER: Final[tuple[LintLevel, ...]] = (
    LintLevel.INFO,
    LintLevel.WARN,
    LintLevel.ERROR,
)


def check_unknown_controllers(
    binding: Binding, inventory_names: Collection[str]
) -> list[LintFinding]:
    return [
        LintFinding(
            level=LintLevel.WARN,
            title=LINT_UNKNOWN_CONTROLLER,
            detail=f"Controller '{name}' is referenced but not found in controllers directory",
            where=binding.selector,
        )
        for name in binding.controllers
        if name not in inventory_names
    ]


def check_action_format(binding: Binding) -> list[LintFinding]:
    return [
        LintFinding(
            level=LintLevel.WARN,
            title=LINT_SUSPICIOUS_ACTION,
            detail=f"Action '{action}' doesn't match expected 'event->controller#method' format",
            hint=LINT_SUSPICIOUS_ACTION_HINT,
            where=binding.selector,
        )
        for action in binding.actions
        if parse_action(action) is None
    ]


def check_empty_binding(binding: Binding) -> list[LintFinding]:
    if not binding.broken:
        return []
    return [
        LintFinding(
            level=LintLevel.INFO,
            title=LINT_EMPTY_BINDING,
            detail="Element has data-controller but no actions, targets, or values",
            hint=LINT_EMPTY_BINDING_HINT,
            where=binding.selector,
        )
    ]


def lint_bindings(
    inventory_names: Collection[str], bindings: list[Binding]
) -> list[LintFinding]:
    """
    Evaluate every rule against every binding.

    Args:
        inventory_names: Names of all discovered controllers.
        bindings: Bindings in scan order.

    Returns:
        list[LintFinding]: Findings in binding-then-rule order.
    """
    findings: list[LintFinding] = []
    for binding in bindings:
        findings.extend(check_unknown_controllers(binding, inventory_names))
        findings.extend(check_action_format(binding))
        findings.extend(check_empty_binding(binding))
    return findings


def should_fail(findings: list[LintFinding], fail_on: FailOnLevel) -> bool:
    """
    Decide whether `lint` must exit with a failure status.

    Returns:
        bool: False for FailOnLevel.NONE; otherwise True iff at least one
            finding is at or above the threshold level.
    """
    fail_on = FailOnLevel(fail_on)
    if fail_on is FailOnLevel.NONE:
        return False
    threshold = LEVEL_ORDER.index(LintLevel(fail_on.value))
    return any(LEVEL_ORDER.index(f.level) >= threshold for f in findings)
