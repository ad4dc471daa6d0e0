"""
Progress bar creation and management module using Rich.

The scan shows a single bar while it walks the view templates. Bars are bound
to the shared console from `utils` and are transient: they disappear once the
scan finishes and the summary line is printed in their place.
"""

from enum import StrEnum
from typing import Optional

from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
)

from utils import console


class ProgressState(StrEnum):
    """
    Progress bar states with their color codes.

    Attributes:
        IN_PROGRESS: Magenta color for tasks currently being processed.
        COMPLETE: Green color for successfully completed tasks.
        WARNING: Yellow color for tasks that finished with findings.
        ERROR: Red color for tasks that have encountered errors.
    """

    IN_PROGRESS = "magenta"
    COMPLETE = "green"
    WARNING = "yellow"
    ERROR = "red"


def create_progress() -> Progress:
    """
    Creates a Rich Progress instance with the standard columns.

    Returns:
        Progress: Spinner, description, bar and "done/total" counter.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    )


def styled(description: str, progress_state: ProgressState) -> str:
    """Color a description; its own text is escaped so paths stay literal."""
    return f"[{progress_state}]{escape(description)}"


def create_task(progress: Progress, description: str, total: Optional[int]) -> TaskID:
    return progress.add_task(styled(description, ProgressState.IN_PROGRESS), total=total)


def update_progress(
    progress: Progress,
    task: TaskID,
    progress_state: Optional[ProgressState] = None,
    total: Optional[float] = None,
    completed: Optional[float] = None,
    advance: Optional[float] = None,
    description: Optional[str] = None,
) -> None:
    """
    Updates a progress task with new state, progress, or description.

    `progress_state` and `description` go together: a new description is
    always shown in the color of a state.

    Raises:
        ValueError: If only one of progress_state and description is given.
    """
    if bool(progress_state) != bool(description):
        raise ValueError("progress_state and description must be provided together.")

    # Rich treats description=None as "clear", so it is omitted when unset
    if description and progress_state:
        progress.update(
            task,
            total=total,
            completed=completed,
            advance=advance,
            description=styled(description, progress_state),
        )
    else:
        progress.update(task, total=total, completed=completed, advance=advance)
