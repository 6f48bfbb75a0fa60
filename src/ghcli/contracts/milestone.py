"""Milestone contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from ghcli.contracts.results import FetchFailure


class Milestone(BaseModel):
    """A milestone as returned by ``GET /repos/{owner}/{repo}/milestones``.

    ``url`` is the API locator used to mutate exactly this milestone.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    url: str
    number: int | None = None
    state: str | None = None
    html_url: str | None = None
    open_issues: int = 0
    closed_issues: int = 0
    due_on: datetime | None = None


class GroupMember(BaseModel):
    model_config = ConfigDict(frozen=True)

    locator: str
    repository: str


class MilestoneGroup(BaseModel):
    """All matching milestones across repositories that share one title."""

    title: str
    members: list[GroupMember] = Field(default_factory=list)

    @property
    def repositories(self) -> list[str]:
        return [member.repository for member in self.members]


@dataclass(frozen=True)
class RepositoryMilestones:
    repository: str
    milestones: list[Milestone] = field(default_factory=list)
    failure: FetchFailure | None = None

    @property
    def failed(self) -> bool:
        return self.failure is not None
