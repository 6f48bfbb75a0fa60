"""Remote milestone client contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from ghcli.contracts.milestone import GroupMember
from ghcli.contracts.results import CloseResult, FetchResult


class MilestoneClient(ABC):
    @abstractmethod
    async def __aenter__(self) -> MilestoneClient: ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    @abstractmethod
    async def list_milestones(self, repository: str) -> FetchResult:
        """List open milestones of one repository. Must not raise on remote failure."""

    @abstractmethod
    async def close_milestone(self, member: GroupMember) -> CloseResult:
        """Close the milestone at ``member.locator``. Must not raise on remote failure."""
