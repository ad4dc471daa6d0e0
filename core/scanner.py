"""
Scan orchestration: from a project root to a complete ScanResult.

The pipeline runs in four stages:

1.  **Inventory**: controller module paths are discovered and turned into
    ControllerDescriptors from their file names.
2.  **Bindings**: every view template is read in full, the tag scanner finds
    elements carrying "data-" attributes, and each one becomes a Binding with
    the next sequential id.
3.  **Aggregation**: bindings are folded back onto the inventory.
4.  **Lint**: the closed rule set runs over inventory names and bindings.

All mutable state of a run (the binding counter and the accumulated lists)
lives in a `ScanContext` created per call, so independent scans never share
anything. A file that cannot be read aborts the whole scan; nothing partial is
returned.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from adapters.project_tree import ProjectTree
from constants import DEFAULT_LAYOUT
from core.aggregation import aggregate_controllers
from core.bindings import format_binding_id, synthesize_binding
from core.file_io import FileReader, FilesystemFileReader
from core.inventory import build_inventory
from core.lint import lint_bindings
from core.models import Binding, ControllerDescriptor, ScanMeta, ScanResult
from core.tag_scanner import line_number_at, scan_tags
from models import ProjectLayout
from ui.progress_display import ProgressDisplay, RichProgressDisplay
from utils import debug


@dataclass
class ScanContext:
    """
    Mutable state owned by exactly one scan.

    Attributes:
        tree: Discovery adapter for the project being scanned.
        controllers: Inventory built so far, in discovery order.
        bindings: Bindings recorded so far, in file then document order.
        binding_count: Number of ids handed out; the next id is count + 1.
    """

    tree: ProjectTree
    controllers: list[ControllerDescriptor] = field(default_factory=list)
    bindings: list[Binding] = field(default_factory=list)
    binding_count: int = 0

    def allocate_binding_id(self) -> str:
        self.binding_count += 1
        return format_binding_id(self.binding_count)


def scan_project(
    root: Path,
    layout: ProjectLayout = DEFAULT_LAYOUT,
    file_reader: FileReader | None = None,
    progress_display: ProgressDisplay | None = None,
    verbose: bool = False,
) -> ScanResult:
    """
    Scan a project and build its controller/binding cross-reference.

    Args:
        root: Project root. Layout directories are resolved against it and
            every path in the result is relative to it.
        layout: Directory and naming conventions. Defaults to the Rails layout.
        file_reader: Optional reader for template sources. Defaults to
            FilesystemFileReader.
        progress_display: Optional progress display. Defaults to
            RichProgressDisplay; pass NoOpProgressDisplay() in tests.
        verbose: When True, print a debug line per discovered file.

    Returns:
        ScanResult: Aggregated controllers, bindings and lint findings.

    Raises:
        FileReadError: If a discovered template cannot be read.
    """
    context = ScanContext(ProjectTree(root, layout))
    reader = file_reader if file_reader is not None else FilesystemFileReader()
    display = progress_display if progress_display is not None else RichProgressDisplay()

    collect_controllers(context, verbose)
    collect_bindings(context, reader, display, verbose)

    inventory_names = {c.name for c in context.controllers}

    return ScanResult(
        meta=ScanMeta(root=str(root), generated_at=_timestamp()),
        controllers=aggregate_controllers(context.controllers, context.bindings),
        bindings=context.bindings,
        lint=lint_bindings(inventory_names, context.bindings),
    )


def collect_controllers(context: ScanContext, verbose: bool = False) -> None:
    tree = context.tree
    relative_paths = [tree.relative(p) for p in tree.stream_controller_paths()]
    context.controllers.extend(
        build_inventory(relative_paths, tree.layout["controller_suffix"])
    )

    if verbose:
        for controller in context.controllers:
            debug(f"controller {controller.name} <- {controller.module_path}")


def collect_bindings(
    context: ScanContext,
    reader: FileReader,
    display: ProgressDisplay,
    verbose: bool = False,
) -> None:
    """
    Read every template and record one Binding per qualifying element.

    Templates are processed in discovery order, so ids follow file order and
    then document order within each file.
    """
    tree = context.tree
    template_paths = list(tree.stream_template_paths())

    with display as progress:
        progress.on_start("Scanning view templates...", total=len(template_paths))

        for template_path in template_paths:
            file_path = tree.relative(template_path)
            content = reader.read_file(template_path)
            found = 0

            for span in scan_tags(content):
                binding = synthesize_binding(
                    span.text,
                    context.allocate_binding_id(),
                    file_path,
                    line_number_at(content, span.offset),
                )
                context.bindings.append(binding)
                found += 1

            if verbose:
                debug(f"template {file_path}: {found} binding(s)")
            progress.on_update(advance=1, description=f"Scanned {file_path}")

        progress.on_complete(
            f"Found {len(context.bindings)} bindings in {len(template_paths)} templates.",
            completed=len(template_paths),
        )


def _timestamp() -> str:
    return datetime.now().astimezone().isoformat(timespec="seconds")
