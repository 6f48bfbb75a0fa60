"""Shared test fixtures for gh-cli tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes.client import FakeMilestoneClient
from tests.fakes.milestones import make_milestone


@pytest.fixture
def sprint_client() -> FakeMilestoneClient:
    """Two repositories sharing a 'Sprint 1' milestone."""
    return FakeMilestoneClient(
        milestones={
            "a/x": [make_milestone("Sprint 1", "u1")],
            "a/y": [make_milestone("Sprint 1", "u2"), make_milestone("Sprint 2", "u3", number=2)],
        }
    )


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """A valid settings.toml with two repositories and credentials."""
    path = tmp_path / "settings.toml"
    path.write_text(
        "\n".join(
            [
                "[github]",
                'repositories = ["a/x", "a/y"]',
                "",
                "[github.auth]",
                'username = "octocat"',
                'token = "secret"',
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path
