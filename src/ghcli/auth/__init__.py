"""Auth module public exports."""

from ghcli.auth.base import CredentialResolver, Credentials
from ghcli.auth.factory import create_credential_resolver

__all__ = ["CredentialResolver", "Credentials", "create_credential_resolver"]
