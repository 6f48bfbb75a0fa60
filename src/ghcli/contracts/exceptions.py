"""Exception hierarchy for gh-cli.

Only fatal conditions are exceptions. Per-repository fetch failures and
per-milestone close failures are values (see ``ghcli.contracts.results``).
"""

from __future__ import annotations


class GhCliError(Exception):
    """Base exception for all gh-cli errors."""


class ConfigError(GhCliError):
    """Configuration directory, file loading or validation failure."""


class AuthenticationError(GhCliError):
    """Credentials are required but missing or empty."""


class PatternError(GhCliError):
    """The milestone pattern is not a valid regular expression."""

    def __init__(self, message: str, *, pattern: str) -> None:
        super().__init__(message)
        self.pattern = pattern


class InteractionError(GhCliError):
    """The interactive confirmation could not be read from the terminal."""
