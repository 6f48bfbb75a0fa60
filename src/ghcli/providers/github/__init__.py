"""GitHub provider."""

from ghcli.providers.github.client import GitHubMilestoneClient

__all__ = ["GitHubMilestoneClient"]
