"""Progress reporting protocol for the fetch and close phases.

The engine emits phase lifecycle events; consumers (e.g. the CLI's Rich
progress bar) implement ``RunProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

FETCH_PHASE = "Fetch"
CLOSE_PHASE = "Close"


class RunProgress(ABC):
    """Observer interface for fan-out phase events.

    A phase is always finished with ``phase_done`` before the orchestrator
    prompts the operator, so implementations may own the terminal while a
    phase is running.
    """

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """A phase is starting. *total* is ``None`` for indeterminate phases."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str) -> None:
        """One request within *phase* has resolved, successfully or not."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        """Every request of *phase* has resolved."""
        ...  # pragma: no cover


class NullRunProgress(RunProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def item_done(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass
