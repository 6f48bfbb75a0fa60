"""Credential resolver interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    """Basic-auth pair shared read-only by every request of a run."""

    username: str
    token: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, token='***')"


class CredentialResolver(ABC):
    @abstractmethod
    async def resolve(self) -> Credentials:
        """Resolve and return a username/token pair."""
