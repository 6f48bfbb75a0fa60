"""Presentation and confirmation of milestone groups."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping

from ghcli.contracts.milestone import MilestoneGroup

Confirm = Callable[[str], bool]
"""Blocking yes/no question. Raises ``InteractionError`` if no answer can be read."""


def iterate_groups(groups: Mapping[str, MilestoneGroup]) -> Iterator[tuple[int, MilestoneGroup]]:
    yield from enumerate(groups.values(), start=1)


def summary_line(count: int, pattern: str) -> str:
    noun = "milestone" if count == 1 else "milestones"
    return f"Found {count} open {noun} matching the pattern '{pattern}':"


def render_group(index: int, group: MilestoneGroup) -> str:
    lines = [f"({index}) '{group.title}' is open in:"]
    lines.extend(f" - {repository}" for repository in group.repositories)
    lines.append("")
    return "\n".join(lines)


def confirmation_text(title: str) -> str:
    return f"Close milestone '{title}' in those repositories?"
