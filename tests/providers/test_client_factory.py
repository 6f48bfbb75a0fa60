from __future__ import annotations

from ghcli.auth.base import Credentials
from ghcli.contracts.config import GitHubSettings
from ghcli.providers.factory import create_client
from ghcli.providers.github.client import GitHubMilestoneClient


def test_create_client_returns_github_client_for_configured_host() -> None:
    client = create_client(
        GitHubSettings(api_url="https://ghe.example.com/api/v3"),
        Credentials(username="octocat", token="secret"),
    )

    assert isinstance(client, GitHubMilestoneClient)
    assert client._api_url == "https://ghe.example.com/api/v3"
