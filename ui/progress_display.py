"""
Progress reporting protocol for decoupling UI from the scan pipeline.

The scanner reports progress through `ProgressDisplay` so it never depends on
Rich directly. The CLI passes `RichProgressDisplay`; tests pass
`NoOpProgressDisplay`.
"""

from types import TracebackType
from typing import Protocol

from rich.progress import Progress, TaskID
from ui.progress import (
    ProgressState,
    create_progress,
    create_task,
    update_progress,
)


class ProgressDisplay(Protocol):
    """
    Protocol for progress reporting.

    The lifecycle is:
    1. Context manager entry (__enter__)
    2. on_start() - Called once at the beginning
    3. on_update() - Called once per processed item
    4. on_complete() - Called once at the end
    5. Context manager exit (__exit__)
    """

    def __enter__(self) -> "ProgressDisplay":
        """Enter the progress context."""

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the progress context."""

    def on_start(self, description: str, total: int | None) -> None:
        """
        Initialize progress reporting for a new task.

        Args:
            description: Initial description text to display.
            total: Total number of items to process. If None, progress is
                indeterminate.
        """

    def on_update(
        self, *, advance: int | None = None, description: str | None = None
    ) -> None:
        """
        Advance the counter, replace the description, or both.

        At least one of `advance` or `description` must be provided.
        """

    def on_complete(
        self, description: str, completed: int, total: int | None = None
    ) -> None:
        """
        Mark the task as complete.

        Args:
            description: Final description text to display.
            completed: Number of items that were completed.
            total: Optional new total; the existing one is kept when None.
        """


class RichProgressDisplay:
    """
    Rich UI implementation of ProgressDisplay.

    The Rich Progress instance is only created on context entry, so building
    a RichProgressDisplay has no side effects on the terminal.
    """

    def __init__(self) -> None:
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> "RichProgressDisplay":
        self._progress = create_progress()
        self._progress.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._progress:
            self._progress.__exit__(exc_type, exc_val, exc_tb)

    def on_start(self, description: str, total: int | None) -> None:
        """
        Create the task shown by the bar.

        Raises:
            RuntimeError: If not used as a context manager.
        """
        if not self._progress:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager. "
                "Use: with RichProgressDisplay() as rpd:"
            )
        self._task = create_task(self._progress, description, total=total)

    def on_update(
        self, *, advance: int | None = None, description: str | None = None
    ) -> None:
        """
        Advance the bar and/or replace its description.

        Raises:
            RuntimeError: If not used as a context manager or if on_start()
                was not called first.
            ValueError: If neither advance nor description is provided.
        """
        progress, task = self._require_task("on_update")

        if not (advance or description):
            raise ValueError(
                "At least one of 'advance' or 'description' must be provided to on_update()"
            )

        if description:
            update_progress(
                progress,
                task,
                ProgressState.IN_PROGRESS,
                advance=advance,
                description=description,
            )
        else:
            update_progress(progress, task, advance=advance)

    def on_complete(
        self, description: str, completed: int, total: int | None = None
    ) -> None:
        progress, task = self._require_task("on_complete")

        update_progress(
            progress,
            task,
            ProgressState.COMPLETE,
            completed=completed,
            total=total,
            description=description,
        )

    def _require_task(self, caller: str) -> tuple[Progress, TaskID]:
        if not self._progress:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager. "
                "Use: with RichProgressDisplay() as rpd:"
            )
        if self._task is None:
            raise RuntimeError(f"on_start() must be called before {caller}()")
        return self._progress, self._task


class NoOpProgressDisplay:
    """
    No-op implementation of ProgressDisplay for testing.
    """

    def __enter__(self) -> "NoOpProgressDisplay":
        return self

    def __exit__(self, *args) -> None:
        pass

    def on_start(self, description: str, total: int | None) -> None:
        pass

    def on_update(
        self, *, advance: int | None = None, description: str | None = None
    ) -> None:
        pass

    def on_complete(
        self, description: str, completed: int, total: int | None = None
    ) -> None:
        pass
