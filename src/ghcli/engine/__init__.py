"""Fan-out, aggregation and orchestration of milestone runs."""

from ghcli.engine.aggregator import aggregate, compile_pattern
from ghcli.engine.fetcher import fetch_all
from ghcli.engine.interaction import Confirm, confirmation_text, iterate_groups, render_group, summary_line
from ghcli.engine.mutator import close_group
from ghcli.engine.orchestrator import MilestoneCloser, RunPhase
from ghcli.engine.progress import NullRunProgress, RunProgress

__all__ = [
    "Confirm",
    "MilestoneCloser",
    "NullRunProgress",
    "RunPhase",
    "RunProgress",
    "aggregate",
    "close_group",
    "compile_pattern",
    "confirmation_text",
    "fetch_all",
    "iterate_groups",
    "render_group",
    "summary_line",
]
