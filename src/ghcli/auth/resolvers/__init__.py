"""Concrete credential resolvers."""

from ghcli.auth.resolvers.env import EnvCredentialResolver
from ghcli.auth.resolvers.static import StaticCredentialResolver

__all__ = ["EnvCredentialResolver", "StaticCredentialResolver"]
