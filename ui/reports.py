"""
Terminal reports for the `list`, `bindings` and `lint` commands.

Each report is a flat listing printed through Rich. Anything that comes from
the scanned project (names, selectors, action strings) is markup-escaped so
that brackets in templates are printed literally.
"""

from rich import print as pr
from rich.markup import escape

from core.models import AggregatedController, Binding, LintFinding
from models import LintLevel

LEVEL_STYLES = {
    LintLevel.INFO: "cyan",
    LintLevel.WARN: "yellow",
    LintLevel.ERROR: "red",
}


def _joined(items: list[str]) -> str:
    return escape(", ".join(items))


def print_controllers(controllers: list[AggregatedController]) -> None:
    pr("[bold]Controllers:[/bold]")
    for controller in controllers:
        pr(
            f"  [bold green]{escape(controller.name)}[/bold green]"
            f" ({escape(controller.module_path)})"
        )
        pr(f"    Elements: {controller.element_count}")
        if controller.actions:
            pr(f"    Actions: {_joined(controller.actions)}")
        if controller.targets:
            pr(f"    Targets: {_joined(controller.targets)}")
        if controller.values:
            pr(f"    Values: {_joined(controller.values)}")
        pr()


def filter_bindings(bindings: list[Binding], controller: str | None) -> list[Binding]:
    """Keep bindings that declare `controller` in `data-controller`; all when None."""
    if controller is None:
        return list(bindings)
    return [b for b in bindings if controller in b.controllers]


def print_bindings(bindings: list[Binding]) -> None:
    pr("[bold]Bindings:[/bold]")
    for binding in bindings:
        pr(f"  [bold]{binding.id}[/bold] - {escape(binding.selector)}")
        if binding.controllers:
            pr(f"    Controllers: {_joined(binding.controllers)}")
        if binding.actions:
            pr(f"    Actions: {_joined(binding.actions)}")
        if binding.targets:
            pr(f"    Targets: {_joined([f'{t.controller}.{t.name}' for t in binding.targets])}")
        if binding.values:
            pr(
                "    Values: "
                + _joined([f"{v.controller}.{v.name}={v.value}" for v in binding.values])
            )
        if binding.broken:
            pr("    [bold red]⚠️  BROKEN[/bold red]")
        pr()


def print_lint(findings: list[LintFinding]) -> None:
    pr("[bold]Lint Results:[/bold]")
    for finding in findings:
        style = LEVEL_STYLES[finding.level]
        level = escape(f"[{finding.level.upper()}]")
        pr(f"  [{style}]{level}[/{style}] {escape(finding.title)}")
        pr(f"    {escape(finding.detail)}")
        if finding.hint:
            pr(f"    Hint: {escape(finding.hint)}")
        if finding.where:
            pr(f"    Location: {escape(finding.where)}")
        pr()
