"""Progress display implementations."""

from ghcli.progress.rich import RichRunProgress

__all__ = ["RichRunProgress"]
