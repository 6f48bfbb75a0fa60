"""Outcome values for remote calls.

Adapters never raise for a failed fetch or close. They return one of the
variants below and the fan-out helpers reduce them explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from ghcli.contracts.milestone import GroupMember, Milestone


@dataclass(frozen=True)
class FetchSuccess:
    repository: str
    milestones: list[Milestone]


@dataclass(frozen=True)
class FetchFailure:
    repository: str
    reason: str
    status_code: int | None = None


@dataclass(frozen=True)
class CloseSuccess:
    member: GroupMember


@dataclass(frozen=True)
class CloseFailure:
    member: GroupMember
    reason: str
    status_code: int | None = None


FetchResult: TypeAlias = FetchSuccess | FetchFailure
CloseResult: TypeAlias = CloseSuccess | CloseFailure
