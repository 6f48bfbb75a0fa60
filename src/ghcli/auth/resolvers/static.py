"""Static (configuration file) credential resolver."""

from __future__ import annotations

from dataclasses import dataclass, field

from ghcli.auth.base import CredentialResolver, Credentials
from ghcli.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class StaticCredentialResolver(CredentialResolver):
    username: str
    token: str = field(repr=False)

    async def resolve(self) -> Credentials:
        username = self.username.strip()
        token = self.token.strip()
        if not username or not token:
            raise AuthenticationError("github.auth requires a non-empty username and token")
        return Credentials(username=username, token=token)
