"""Fetch, aggregate, confirm and close, one group at a time."""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Callable, Sequence
from enum import StrEnum

from ghcli.contracts.client import MilestoneClient
from ghcli.contracts.report import CloseMilestoneReport
from ghcli.engine.aggregator import aggregate
from ghcli.engine.fetcher import fetch_all
from ghcli.engine.interaction import Confirm, confirmation_text, iterate_groups, render_group, summary_line
from ghcli.engine.mutator import close_group, count_failures
from ghcli.engine.progress import NullRunProgress, RunProgress

_LOG = logging.getLogger(__name__)


class RunPhase(StrEnum):
    IDLE = "idle"
    FETCHING = "fetching"
    AGGREGATING = "aggregating"
    PRESENTING = "presenting"
    CONFIRMING = "confirming"
    MUTATING = "mutating"
    SKIPPING = "skipping"
    DONE = "done"


class MilestoneCloser:
    """Drives one ``close-milestone`` run.

    Phases run strictly in sequence. Within the fetch and close phases every
    request is issued concurrently and the phase ends only when all of them
    have resolved. The confirmation for the next group is not asked until the
    previous group's close phase has finished. The blocking confirmation runs
    in a worker thread while the event loop has nothing else in flight.
    """

    def __init__(
        self,
        client: MilestoneClient,
        confirm: Confirm,
        *,
        echo: Callable[[str], None] = print,
        progress: RunProgress | None = None,
    ) -> None:
        self._client = client
        self._confirm = confirm
        self._echo = echo
        self._progress = progress or NullRunProgress()
        self.phase = RunPhase.IDLE

    async def run(self, repositories: Sequence[str], pattern: re.Pattern[str]) -> CloseMilestoneReport:
        self.phase = RunPhase.FETCHING
        fetched = await fetch_all(self._client, repositories, progress=self._progress)

        self.phase = RunPhase.AGGREGATING
        groups = aggregate(fetched, pattern)
        report = CloseMilestoneReport(
            pattern=pattern.pattern,
            groups_found=len(groups),
            failed_repositories=[entry.repository for entry in fetched if entry.failed],
        )

        self._echo("")
        self._echo(summary_line(len(groups), pattern.pattern))

        for index, group in iterate_groups(groups):
            self.phase = RunPhase.PRESENTING
            self._echo(render_group(index, group))

            self.phase = RunPhase.CONFIRMING
            if not await asyncio.to_thread(self._confirm, confirmation_text(group.title)):
                self.phase = RunPhase.SKIPPING
                _LOG.debug("Skipping milestone %r", group.title)
                report.groups_skipped += 1
                continue

            self.phase = RunPhase.MUTATING
            results = await close_group(self._client, group, progress=self._progress)
            failed = count_failures(results)
            report.groups_confirmed += 1
            report.milestones_closed += len(results) - failed
            report.milestones_failed += failed

        if report.groups_confirmed:
            self._echo(f"Closed {report.milestones_closed} milestone(s), {report.milestones_failed} failed.")

        self.phase = RunPhase.DONE
        return report
