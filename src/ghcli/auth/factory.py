"""Credential resolver factory."""

from __future__ import annotations

from ghcli.auth.base import CredentialResolver
from ghcli.auth.resolvers.env import EnvCredentialResolver
from ghcli.auth.resolvers.static import StaticCredentialResolver
from ghcli.contracts.config import GitHubSettings


def create_credential_resolver(settings: GitHubSettings) -> CredentialResolver:
    if settings.auth is not None:
        return StaticCredentialResolver(username=settings.auth.username, token=settings.auth.token)
    return EnvCredentialResolver()
