"""Concurrent closing of one milestone group."""

from __future__ import annotations

import asyncio

from ghcli.contracts.client import MilestoneClient
from ghcli.contracts.milestone import GroupMember, MilestoneGroup
from ghcli.contracts.results import CloseFailure, CloseResult
from ghcli.engine.progress import CLOSE_PHASE, NullRunProgress, RunProgress


async def close_group(
    client: MilestoneClient,
    group: MilestoneGroup,
    *,
    progress: RunProgress | None = None,
) -> list[CloseResult]:
    """Close every member of *group* at once and wait for all of them.

    Results are returned in member order. A failed member does not affect its
    siblings.
    """
    progress = progress or NullRunProgress()
    progress.phase_start(CLOSE_PHASE, total=len(group.members))

    async def close_one(member: GroupMember) -> CloseResult:
        result = await client.close_milestone(member)
        progress.item_done(CLOSE_PHASE)
        return result

    results = await asyncio.gather(*(close_one(member) for member in group.members))
    progress.phase_done(CLOSE_PHASE)
    return list(results)


def count_failures(results: list[CloseResult]) -> int:
    return sum(1 for result in results if isinstance(result, CloseFailure))
