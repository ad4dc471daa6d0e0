"""
Folds the binding set back onto the controller inventory.
"""

from core.attributes import parse_action
from core.models import AggregatedController, Binding, ControllerDescriptor


def aggregate_controller(
    controller: ControllerDescriptor, bindings: list[Binding]
) -> AggregatedController:
    """
    Collect usage statistics for one controller.

    Only bindings whose `controllers` list names this controller count. From
    each of them the element is counted, and the methods of canonical actions
    aimed at this controller plus the target/value names declared for it are
    gathered. Each list is deduplicated and sorted ascending.
    """
    element_count = 0
    actions: set[str] = set()
    targets: set[str] = set()
    values: set[str] = set()

    for binding in bindings:
        if controller.name not in binding.controllers:
            continue

        element_count += 1

        for action in binding.actions:
            ref = parse_action(action)
            if ref and ref.controller == controller.name:
                actions.add(ref.method)

        targets.update(
            t.name for t in binding.targets if t.controller == controller.name
        )
        values.update(v.name for v in binding.values if v.controller == controller.name)

    return AggregatedController(
        name=controller.name,
        module_path=controller.module_path,
        element_count=element_count,
        actions=sorted(actions),
        targets=sorted(targets),
        values=sorted(values),
    )


def aggregate_controllers(
    inventory: list[ControllerDescriptor], bindings: list[Binding]
) -> list[AggregatedController]:
    """Aggregate every inventory entry, preserving inventory order and duplicates."""
    return [aggregate_controller(c, bindings) for c in inventory]
