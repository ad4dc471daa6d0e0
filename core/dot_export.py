"""
Graphviz DOT projection of a scan result.

Nodes are controllers (labelled with their element count). Two edge kinds are
drawn: element selector -> controller for every `data-controller` reference,
and event -> controller for every canonical action, labelled with the full
action string. Non-canonical actions are left out of the graph.
"""

from core.attributes import parse_action
from core.models import ScanResult


def dot_quote(text: str) -> str:
    """Quote a DOT identifier, escaping backslashes, quotes and newlines."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def render_dot(result: ScanResult) -> str:
    lines = ["digraph stimulus {", "  rankdir=LR;", "  node [shape=box];"]

    for controller in result.controllers:
        label = f"{controller.name}\n({controller.element_count} elements)"
        lines.append(f"  {dot_quote(controller.name)} [label={dot_quote(label)}];")

    for binding in result.bindings:
        for controller in binding.controllers:
            lines.append(
                f"  {dot_quote(binding.selector)} -> {dot_quote(controller)}"
                ' [label="data-controller"];'
            )

        for action in binding.actions:
            ref = parse_action(action)
            if ref is None:
                continue
            lines.append(
                f"  {dot_quote(ref.event)} -> {dot_quote(ref.controller)}"
                f" [label={dot_quote(action)}];"
            )

    lines.append("}")
    return "\n".join(lines) + "\n"
