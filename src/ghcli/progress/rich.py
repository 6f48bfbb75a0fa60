"""Rich-based phase progress display."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from ghcli.engine.progress import RunProgress


class RichRunProgress(RunProgress):
    """Transient terminal progress bar powered by Rich.

    The live display is started by ``phase_start`` and stopped by
    ``phase_done`` so it is never active while the operator is prompted::

        with RichRunProgress() as progress:
            report = await MilestoneCloser(client, confirm, progress=progress).run(repos, pattern)
    """

    _PHASE_LABELS: ClassVar[dict[str, str]] = {
        "Fetch": "[cyan]Fetch[/]",
        "Close": "[red]Close[/]",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress: Progress | None = None
        self._task_ids: dict[str, RichTaskID] = {}

    def __enter__(self) -> RichRunProgress:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._stop()

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self._stop()
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:>14}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self._console,
            transient=True,
        )
        self._progress.start()
        label = self._PHASE_LABELS.get(phase, phase)
        self._task_ids[phase] = self._progress.add_task(label, total=total)

    def item_done(self, phase: str) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is not None and self._progress is not None:
            self._progress.advance(task_id)

    def phase_done(self, phase: str) -> None:
        if self._task_ids.pop(phase, None) is None:
            return
        self._stop()

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
        self._task_ids.clear()
