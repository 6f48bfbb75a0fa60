"""Public contracts for gh-cli."""

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
from ghcli.contracts.results import (
    CloseFailure,
    CloseResult,
    CloseSuccess,
    FetchFailure,
    FetchResult,
    FetchSuccess,
)

__all__ = [
    "Authentication",
    "AuthenticationError",
    "CloseFailure",
    "CloseMilestoneReport",
    "CloseResult",
    "CloseSuccess",
    "ConfigError",
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "GhCliError",
    "GitHubSettings",
    "GroupMember",
    "InteractionError",
    "Milestone",
    "MilestoneClient",
    "MilestoneGroup",
    "PatternError",
    "RepositoryMilestones",
    "Settings",
]
