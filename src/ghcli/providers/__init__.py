"""Remote client implementations and factory."""

from ghcli.providers.factory import create_client

__all__ = ["create_client"]
