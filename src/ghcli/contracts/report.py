"""Run report contract."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CloseMilestoneReport(BaseModel):
    pattern: str
    groups_found: int = 0
    groups_confirmed: int = 0
    groups_skipped: int = 0
    milestones_closed: int = 0
    milestones_failed: int = 0
    failed_repositories: list[str] = Field(default_factory=list)
