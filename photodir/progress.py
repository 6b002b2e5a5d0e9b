"""Progress tracking context for photodir operations."""

from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.progress import Progress, TaskID


class ProgressContext:
    """Encapsulates progress tracking state for cleaner parameter passing."""

    def __init__(self, progress: Optional[Progress] = None, task: Optional[TaskID] = None):
        self.progress = progress
        self.task = task

    @classmethod
    @contextmanager
    def track(cls, console: Console, description: str, total: int) -> Iterator["ProgressContext"]:
        """Show a transient progress bar for the duration of the block."""
        with Progress(console=console, transient=True) as progress:
            task = progress.add_task(description, total=total)
            yield cls(progress, task)

    @property
    def is_active(self) -> bool:
        return self.progress is not None and self.task is not None

    def update(self, description: str) -> None:
        if self.is_active:
            self.progress.update(self.task, description=description)

    def advance(self, steps: int = 1) -> None:
        if self.is_active:
            self.progress.advance(self.task, steps)
