"""Command-line interface for gh-cli."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import re
import sys
from contextlib import AbstractContextManager
from pathlib import Path

from ghcli import (
    AuthenticationError,
    CloseMilestoneReport,
    ConfigError,
    InteractionError,
    MilestoneCloser,
    PatternError,
    compile_pattern,
    create_client,
    create_credential_resolver,
    default_config_path,
    load_settings,
)
from ghcli._version import package_version
from ghcli.engine.progress import NullRunProgress, RunProgress

_LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gh-cli", description="Bulk operations across GitHub repositories")
    parser.add_argument("--version", action="version", version=f"%(prog)s {package_version()}")
    parser.add_argument("--config", help="Path to settings.toml (defaults to the user configuration directory)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress display")

    subparsers = parser.add_subparsers(dest="command", required=True)
    close_parser = subparsers.add_parser(
        "close-milestone",
        help="Close the given milestone for all configured repositories",
    )
    close_parser.add_argument("pattern", help="A regular expression matching against the milestone name")

    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)
    else:
        logging.basicConfig(level=logging.WARNING, format="%(message)s", stream=sys.stderr)


def _confirm(text: str) -> bool:
    import questionary

    try:
        answer = questionary.confirm(text, default=False).ask()
    except (EOFError, OSError) as exc:
        raise InteractionError(f"failed to read confirmation from the terminal: {exc}") from exc
    if answer is None:
        raise InteractionError("confirmation was cancelled")
    return bool(answer)


def _progress_for(args: argparse.Namespace) -> AbstractContextManager[RunProgress]:
    if args.no_progress:
        return contextlib.nullcontext(NullRunProgress())
    from ghcli.progress import RichRunProgress

    return RichRunProgress()


def _resolve_config_path(args: argparse.Namespace) -> Path:
    if args.config:
        return Path(args.config).expanduser()
    return default_config_path()


async def _run_close_milestone(args: argparse.Namespace, pattern: re.Pattern[str]) -> CloseMilestoneReport:
    config_path = _resolve_config_path(args)
    print(f"Reading configuration file from {config_path}")
    if not config_path.exists():
        print("Config file not found - continuing with defaults")
    settings = load_settings(config_path)

    credentials = await create_credential_resolver(settings.github).resolve()

    with _progress_for(args) as progress:
        async with create_client(settings.github, credentials) as client:
            closer = MilestoneCloser(client, _confirm, progress=progress)
            report = await closer.run(settings.github.repositories, pattern)

    if report.failed_repositories:
        _LOG.warning("Skipped repositories after fetch failure: %s", ", ".join(report.failed_repositories))
    return report


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    try:
        pattern = compile_pattern(args.pattern)
        asyncio.run(_run_close_milestone(args, pattern))
        return 0
    except PatternError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except AuthenticationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except InteractionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1
