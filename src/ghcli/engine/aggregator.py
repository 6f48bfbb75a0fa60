"""Pattern filtering and title grouping of fetched milestones."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ghcli.contracts.exceptions import PatternError
from ghcli.contracts.milestone import GroupMember, MilestoneGroup, RepositoryMilestones


def compile_pattern(raw: str) -> re.Pattern[str]:
    try:
        return re.compile(raw)
    except re.error as exc:
        raise PatternError(f"invalid pattern {raw!r}: {exc}", pattern=raw) from exc


def aggregate(
    repository_milestones: Iterable[RepositoryMilestones],
    pattern: re.Pattern[str],
) -> dict[str, MilestoneGroup]:
    """Group matching milestones by exact title.

    Repositories are visited in input order and milestones in list order, so
    group members keep that traversal order and groups keep first-sight
    order. Titles are matched unanchored against the unmodified string.
    Milestones with the same title in different repositories end up in the
    same group.
    """
    groups: dict[str, MilestoneGroup] = {}
    for entry in repository_milestones:
        for milestone in entry.milestones:
            if pattern.search(milestone.title) is None:
                continue
            group = groups.get(milestone.title)
            if group is None:
                group = groups[milestone.title] = MilestoneGroup(title=milestone.title)
            group.members.append(GroupMember(locator=milestone.url, repository=entry.repository))
    return groups
