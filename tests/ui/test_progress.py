"""
Tests for the progress module using pytest.

Tests cover:
- ProgressState: enum values
- create_progress: Rich Progress instance creation with correct columns
- styled: state coloring and markup escaping
- create_task: task creation with description and total
- update_progress: progress updates with various parameters and error cases
"""

import pytest
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
)

from ui.progress import (
    ProgressState,
    create_progress,
    create_task,
    styled,
    update_progress,
)
from utils import console


# ============================================================================
# Tests for ProgressState
# ============================================================================


@pytest.mark.unit
def test_progress_state_values():
    """ProgressState should have correct enum values."""
    assert ProgressState.IN_PROGRESS == "magenta"
    assert ProgressState.COMPLETE == "green"
    assert ProgressState.WARNING == "yellow"
    assert ProgressState.ERROR == "red"


# ============================================================================
# Tests for create_progress
# ============================================================================


@pytest.mark.unit
def test_create_progress_has_correct_columns():
    """create_progress should create Progress with spinner, text, bar and counter."""
    progress = create_progress()

    assert isinstance(progress, Progress)
    columns = progress.columns
    assert len(columns) == 4
    assert isinstance(columns[0], SpinnerColumn)
    assert isinstance(columns[1], TextColumn)
    assert isinstance(columns[2], BarColumn)
    assert isinstance(columns[3], MofNCompleteColumn)


@pytest.mark.unit
def test_create_progress_uses_shared_console():
    progress = create_progress()

    assert progress.console is console
    assert progress.live.transient is True


# ============================================================================
# Tests for styled
# ============================================================================


@pytest.mark.unit
def test_styled_prefixes_state():
    assert styled("Scanning", ProgressState.COMPLETE) == "[green]Scanning"


@pytest.mark.unit
def test_styled_escapes_markup():
    assert styled("Scanned app/views/[id]/show.html.erb", ProgressState.IN_PROGRESS) == (
        "[magenta]Scanned app/views/\\[id]/show.html.erb"
    )


# ============================================================================
# Tests for create_task
# ============================================================================


@pytest.mark.unit
def test_create_task_with_total():
    """create_task should create a task with description and total."""
    progress = create_progress()

    task_id = create_task(progress, "Scanning view templates...", total=12)

    task = progress.tasks[task_id]
    assert task.description == f"[{ProgressState.IN_PROGRESS}]Scanning view templates..."
    assert task.total == 12


@pytest.mark.unit
def test_create_task_without_total():
    """create_task should create indeterminate task when total is None."""
    progress = create_progress()

    task_id = create_task(progress, "Scanning", total=None)

    assert progress.tasks[task_id].total is None


# ============================================================================
# Tests for update_progress
# ============================================================================


@pytest.mark.unit
def test_update_progress_with_advance_only():
    """update_progress should advance progress without changing description."""
    progress = create_progress()
    task_id = create_task(progress, "Initial description", total=100)
    original_description = progress.tasks[task_id].description

    update_progress(progress, task_id, advance=10)
    update_progress(progress, task_id, advance=5)

    task = progress.tasks[task_id]
    assert task.completed == 15
    assert task.description == original_description


@pytest.mark.unit
def test_update_progress_with_completed_and_total():
    progress = create_progress()
    task_id = create_task(progress, "Test task", total=100)

    update_progress(progress, task_id, completed=25, total=200)

    task = progress.tasks[task_id]
    assert task.completed == 25
    assert task.total == 200


@pytest.mark.unit
def test_update_progress_with_state_and_advance():
    """update_progress should update both state/description and advance."""
    progress = create_progress()
    task_id = create_task(progress, "Initial", total=100)

    update_progress(
        progress,
        task_id,
        progress_state=ProgressState.IN_PROGRESS,
        description="Scanned app/views/a.html.erb",
        advance=1,
    )

    task = progress.tasks[task_id]
    assert task.description == "[magenta]Scanned app/views/a.html.erb"
    assert task.completed == 1


@pytest.mark.unit
def test_update_progress_all_states():
    """update_progress should work with all ProgressState values."""
    progress = create_progress()
    task_id = create_task(progress, "Test", total=100)

    for state in ProgressState:
        update_progress(
            progress, task_id, progress_state=state, description=f"State {state.name}"
        )
        assert progress.tasks[task_id].description == f"[{state}]State {state.name}"


@pytest.mark.unit
def test_update_progress_state_without_description_raises_error():
    progress = create_progress()
    task_id = create_task(progress, "Test task", total=100)

    with pytest.raises(
        ValueError, match="progress_state and description must be provided together"
    ):
        update_progress(progress, task_id, progress_state=ProgressState.COMPLETE)


@pytest.mark.unit
def test_update_progress_description_without_state_raises_error():
    progress = create_progress()
    task_id = create_task(progress, "Test task", total=100)

    with pytest.raises(
        ValueError, match="progress_state and description must be provided together"
    ):
        update_progress(progress, task_id, description="New description")
