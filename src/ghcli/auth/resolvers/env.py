"""Environment credential resolver."""

from __future__ import annotations

import os

from ghcli.auth.base import CredentialResolver, Credentials
from ghcli.contracts.exceptions import AuthenticationError

USERNAME_ENV = "GITHUB_USERNAME"
TOKEN_ENV = "GITHUB_TOKEN"


class EnvCredentialResolver(CredentialResolver):
    async def resolve(self) -> Credentials:
        username = (os.getenv(USERNAME_ENV) or "").strip()
        token = (os.getenv(TOKEN_ENV) or "").strip()
        if not username or not token:
            raise AuthenticationError(
                f"authentication required: add [github.auth] to the config file or set {USERNAME_ENV} and {TOKEN_ENV}"
            )
        return Credentials(username=username, token=token)
