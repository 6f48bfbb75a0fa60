"""Factory for the remote milestone client."""

from __future__ import annotations

from ghcli.auth.base import Credentials
from ghcli.contracts.client import MilestoneClient
from ghcli.contracts.config import GitHubSettings
from ghcli.providers.github.client import GitHubMilestoneClient


def create_client(settings: GitHubSettings, credentials: Credentials) -> MilestoneClient:
    """Create the client for the configured API host.

    The returned client is an async context manager::

        async with create_client(settings.github, credentials) as client:
            result = await client.list_milestones("owner/repo")
    """
    return GitHubMilestoneClient(credentials=credentials, api_url=settings.api_url)
