"""Public API surface for gh-cli."""

from ghcli.auth import CredentialResolver, Credentials, create_credential_resolver
from ghcli.config import config_dir, default_config_path, load_settings
from ghcli.contracts.client import MilestoneClient
from ghcli.contracts.config import Authentication, GitHubSettings, Settings
from ghcli.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    GhCliError,
    InteractionError,
    PatternError,
)
from ghcli.contracts.milestone import GroupMember, Milestone, MilestoneGroup, RepositoryMilestones
from ghcli.contracts.report import CloseMilestoneReport
from ghcli.contracts.results import CloseFailure, CloseResult, CloseSuccess, FetchFailure, FetchResult, FetchSuccess
from ghcli.engine import MilestoneCloser, RunPhase, aggregate, close_group, compile_pattern, fetch_all
from ghcli.providers import create_client

__all__ = [
    "Authentication",
    "AuthenticationError",
    "CloseFailure",
    "CloseMilestoneReport",
    "CloseResult",
    "CloseSuccess",
    "ConfigError",
    "CredentialResolver",
    "Credentials",
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "GhCliError",
    "GitHubSettings",
    "GroupMember",
    "InteractionError",
    "Milestone",
    "MilestoneClient",
    "MilestoneCloser",
    "MilestoneGroup",
    "PatternError",
    "RepositoryMilestones",
    "RunPhase",
    "Settings",
    "aggregate",
    "close_group",
    "compile_pattern",
    "config_dir",
    "create_client",
    "create_credential_resolver",
    "default_config_path",
    "fetch_all",
    "load_settings",
]
