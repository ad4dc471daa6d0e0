"""
stimulus-viz CLI Entry Point.

This module implements the command-line interface for stimulus-viz, a tool that
statically cross-references the Stimulus controllers of a Rails project with the
DOM elements in its ERB views that bind to them, and reports inconsistencies.

The workflow has two halves:

1.  **Scan**: `scan` discovers controllers under `app/javascript/controllers`,
    scans every template under `app/views` for elements carrying `data-`
    binding attributes, aggregates usage per controller, runs the lint rules,
    and saves everything to a JSON cache file.
2.  **Inspect**: `list`, `bindings`, `lint` and `export` read the cache and
    present it as a controller listing, a binding listing, a lint report (with
    an optional failing exit code for CI), or a JSON/DOT export.

Usage:
    $ stimulus-viz scan --root /path/to/rails/app
    $ stimulus-viz lint --fail-on warn
    $ stimulus-viz export --format dot --out stimulus.dot

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal UI, colors, and progress visualization.
    - Inquirer: Interactive export format selection.
"""

from pathlib import Path
from typing import Annotated, NoReturn
import typer
from rich import print as pr
from rich.markup import escape
import inquirer  # type: ignore
from inquirer.themes import GreenPassion  # type: ignore
from constants import DEFAULT_CACHE_FILE, DEFAULT_LAYOUT
from core.cache import dump_scan_result, load_scan_result, save_scan_result
from core.dot_export import render_dot
from core.exceptions import (
    CacheError,
    CacheNotFoundError,
    FileIOError,
)
from core.file_io import FilesystemFileWriter
from core.lint import should_fail
from core.models import ScanResult
from core.scanner import scan_project
from models import ExportFormat, FailOnLevel, LintLevel, ProjectLayout
from ui.reports import filter_bindings, print_bindings, print_controllers, print_lint

app = typer.Typer(
    help="Map Stimulus controllers to the view elements that bind to them."
)

CACHE_HELP = "Cache file written by 'stimulus-viz scan'"


@app.command()
def scan(
    root: Annotated[
        Path,
        typer.Option(
            exists=True,  # Typer throws error if path doesn't exist
            file_okay=False,  # Typer throws error if it's a file, not a dir
            dir_okay=True,
            resolve_path=True,  # Automatically converts to absolute path
            help="Root path of the Rails project",
        ),
    ] = Path("."),
    out: Annotated[
        Path,
        typer.Option(resolve_path=True, help="Output file path"),
    ] = Path(DEFAULT_CACHE_FILE),
    controllers_dir: Annotated[
        str,
        typer.Option(help="Controllers directory, relative to the root"),
    ] = DEFAULT_LAYOUT["controllers_dir"],
    views_dir: Annotated[
        str,
        typer.Option(help="Views directory, relative to the root"),
    ] = DEFAULT_LAYOUT["views_dir"],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print every discovered file."),
    ] = False,
):
    """
    Scan a Rails project for Stimulus controllers and bindings.

    The complete result is written to the cache file; nothing is written when
    any source file cannot be read.

    Raises:
        typer.Exit: With code 1 when a file cannot be read or written.
    """
    layout: ProjectLayout = {
        **DEFAULT_LAYOUT,
        "controllers_dir": controllers_dir,
        "views_dir": views_dir,
    }

    pr(f"[green]Scanning: {escape(str(root))}...[/green]")

    try:
        result = scan_project(root, layout, verbose=verbose)
        save_scan_result(result, FilesystemFileWriter.from_path(out))
    except FileIOError as e:
        print_file_io_err(e)
    except Exception as e:  # noqa: BLE001
        print_unexpected_err(e)

    pr(f"Scan completed. Results saved to {escape(str(out))}")
    print_scan_summary(result)


@app.command("list")
def list_controllers(
    cache: Annotated[Path, typer.Option(help=CACHE_HELP)] = Path(DEFAULT_CACHE_FILE),
):
    """List controllers from the cache."""
    result = read_cache(cache)
    print_controllers(result.controllers)


@app.command()
def bindings(
    cache: Annotated[Path, typer.Option(help=CACHE_HELP)] = Path(DEFAULT_CACHE_FILE),
    controller: Annotated[
        str | None,
        typer.Option(help="Only show elements that declare this controller"),
    ] = None,
):
    """Show DOM bindings from the cache."""
    result = read_cache(cache)
    print_bindings(filter_bindings(result.bindings, controller))


@app.command()
def lint(
    cache: Annotated[Path, typer.Option(help=CACHE_HELP)] = Path(DEFAULT_CACHE_FILE),
    fail_on: Annotated[
        FailOnLevel,
        typer.Option(help="Exit with code 1 when a finding is at or above this level"),
    ] = FailOnLevel.NONE,
):
    """
    Print lint findings from the cache.

    Raises:
        typer.Exit: With code 1 when `--fail-on` is met.
    """
    result = read_cache(cache)
    print_lint(result.lint)

    if should_fail(result.lint, fail_on):
        raise typer.Exit(code=1)


@app.command()
def export(
    out: Annotated[Path, typer.Option(help="Output file path")],
    cache: Annotated[Path, typer.Option(help=CACHE_HELP)] = Path(DEFAULT_CACHE_FILE),
    export_format: Annotated[
        ExportFormat | None,
        typer.Option("--format", help="Output format. Prompted for when omitted."),
    ] = None,
):
    """Export the cached scan result as JSON or Graphviz DOT."""
    result = read_cache(cache)

    if export_format is None:
        export_format = make_format_selection()

    if export_format is ExportFormat.JSON:
        content = dump_scan_result(result)
    else:
        content = render_dot(result)

    try:
        FilesystemFileWriter.from_path(out).write_file(content)
    except FileIOError as e:
        print_file_io_err(e)

    pr(f"Exported to {escape(str(out))} in {export_format} format")


def read_cache(cache: Path) -> ScanResult:
    """
    Load the cache for an inspection command, exiting on failure.

    Raises:
        typer.Exit: With code 1 if the cache is missing, corrupt or unreadable.
    """
    try:
        return load_scan_result(cache)
    except CacheNotFoundError as e:
        pr(f"[red]{escape(e.message)}[/red]")
        pr("Run [italic]'stimulus-viz scan'[/italic] first")
        raise typer.Exit(code=1) from e
    except CacheError as e:
        pr(f"[red]{escape(e.message)}[/red]")
        pr("Re-run [italic]'stimulus-viz scan'[/italic] to regenerate it")
        raise typer.Exit(code=1) from e
    except FileIOError as e:
        print_file_io_err(e)


def print_scan_summary(result: ScanResult) -> None:
    warnings = sum(1 for f in result.lint if f.level is LintLevel.WARN)
    pr(
        f"[green]✅ {len(result.controllers)} controllers, "
        f"{len(result.bindings)} bindings, {len(result.lint)} lint findings "
        f"({warnings} warnings).[/green]"
    )


def make_format_selection() -> ExportFormat:
    """
    Interactively prompts the user to pick an export format.

    Returns:
        ExportFormat: The enum member corresponding to the user's selection.

    Raises:
        typer.Exit: With code 1 if the prompt is cancelled.
    """
    questions = [
        inquirer.List(
            "format",
            message="Select the export format",
            choices=list(ExportFormat),
        ),
    ]

    answers = inquirer.prompt(questions, theme=GreenPassion())

    if not answers:
        raise typer.Exit(code=1)

    return ExportFormat(answers["format"])


def print_file_io_err(e: FileIOError) -> NoReturn:
    """
    Displays a user-friendly error message for file I/O operation failures.

    Args:
        e (FileIOError): The exception that was raised, containing error details
            and file path information.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]File I/O Error[/bold red]")
    pr(f"The app encountered an error while working with files: {escape(e.message)}")
    if e.file_path:
        pr(f"File path: [yellow]{escape(e.file_path)}[/yellow]")

    pr("\n[yellow]Quick Fix:[/yellow] Check that the file exists, is UTF-8 and is accessible.")
    if e.original_exception:
        pr(f"\nTechnical details: {escape(str(e.original_exception))}")
        pr(f"Diagnostics: {e.diagnostic_info}")

    raise typer.Exit(code=1) from e


def print_unexpected_err(e: Exception) -> NoReturn:
    """
    Displays a user-friendly error message for unexpected errors.

    This catch-all handler ensures that any unhandled exceptions are presented
    to the user in a friendly way, rather than showing a raw Python stack trace.

    Args:
        e (Exception): The unexpected exception that was raised.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Unexpected Error[/bold red]")
    pr("An unexpected error occurred while scanning the project.")
    pr(f"\n[yellow]Error Type:[/yellow] {type(e).__name__}")
    pr(f"[yellow]Error Message:[/yellow] {escape(str(e))}")
    if e.__cause__:
        pr(f"Caused by: {escape(str(e.__cause__))}")

    raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
