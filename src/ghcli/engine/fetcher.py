"""Concurrent milestone retrieval across repositories."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import assert_never

from ghcli.contracts.client import MilestoneClient
from ghcli.contracts.milestone import RepositoryMilestones
from ghcli.contracts.results import FetchFailure, FetchResult, FetchSuccess
from ghcli.engine.progress import FETCH_PHASE, NullRunProgress, RunProgress


async def fetch_all(
    client: MilestoneClient,
    repositories: Sequence[str],
    *,
    progress: RunProgress | None = None,
) -> list[RepositoryMilestones]:
    """List milestones of every repository at once and wait for all of them.

    The result has the same length and order as *repositories*. A repository
    whose fetch failed contributes an empty milestone list and keeps the
    failure on ``RepositoryMilestones.failure``.
    """
    progress = progress or NullRunProgress()
    progress.phase_start(FETCH_PHASE, total=len(repositories))

    async def fetch_one(repository: str) -> FetchResult:
        result = await client.list_milestones(repository)
        progress.item_done(FETCH_PHASE)
        return result

    results = await asyncio.gather(*(fetch_one(repository) for repository in repositories))
    progress.phase_done(FETCH_PHASE)

    return [to_repository_milestones(result) for result in results]


def to_repository_milestones(result: FetchResult) -> RepositoryMilestones:
    if isinstance(result, FetchSuccess):
        return RepositoryMilestones(repository=result.repository, milestones=list(result.milestones))
    if isinstance(result, FetchFailure):
        return RepositoryMilestones(repository=result.repository, milestones=[], failure=result)
    assert_never(result)
