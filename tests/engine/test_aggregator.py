from __future__ import annotations

import re

import pytest

from ghcli.contracts.exceptions import PatternError
from ghcli.contracts.milestone import GroupMember, RepositoryMilestones
from ghcli.contracts.results import FetchFailure
from ghcli.engine.aggregator import aggregate, compile_pattern
from tests.fakes.milestones import make_milestone


def _sprint_repositories() -> list[RepositoryMilestones]:
    return [
        RepositoryMilestones(repository="a/x", milestones=[make_milestone("Sprint 1", "u1")]),
        RepositoryMilestones(
            repository="a/y",
            milestones=[make_milestone("Sprint 1", "u2"), make_milestone("Sprint 2", "u3")],
        ),
    ]


def test_groups_matching_titles_across_repositories() -> None:
    groups = aggregate(_sprint_repositories(), re.compile("Sprint 1"))

    assert list(groups) == ["Sprint 1"]
    assert groups["Sprint 1"].members == [
        GroupMember(locator="u1", repository="a/x"),
        GroupMember(locator="u2", repository="a/y"),
    ]


def test_non_matching_milestones_leave_no_group() -> None:
    groups = aggregate(_sprint_repositories(), re.compile("Release"))

    assert groups == {}


def test_pattern_is_unanchored_and_groups_keep_first_sight_order() -> None:
    groups = aggregate(_sprint_repositories(), re.compile(r"\d"))

    assert list(groups) == ["Sprint 1", "Sprint 2"]
    assert groups["Sprint 2"].repositories == ["a/y"]


def test_pattern_is_evaluated_against_the_unmodified_title() -> None:
    repos = [RepositoryMilestones(repository="a/x", milestones=[make_milestone("  v1.0  ", "u1")])]

    assert list(aggregate(repos, re.compile(r"^v1\.0$"))) == []
    assert list(aggregate(repos, re.compile(r"^  v1\.0  $"))) == ["  v1.0  "]


def test_titles_are_grouped_case_sensitively() -> None:
    repos = [
        RepositoryMilestones(repository="a/x", milestones=[make_milestone("Sprint", "u1")]),
        RepositoryMilestones(repository="a/y", milestones=[make_milestone("sprint", "u2")]),
    ]

    groups = aggregate(repos, re.compile("(?i)sprint"))

    assert list(groups) == ["Sprint", "sprint"]


def test_repository_with_duplicate_titles_contributes_each_milestone() -> None:
    repos = [
        RepositoryMilestones(
            repository="a/x",
            milestones=[make_milestone("v1.0", "u1"), make_milestone("v1.0", "u2")],
        )
    ]

    groups = aggregate(repos, re.compile("v1"))

    assert groups["v1.0"].repositories == ["a/x", "a/x"]


def test_duplicate_repository_identifiers_are_not_deduplicated() -> None:
    repos = [
        RepositoryMilestones(repository="a/x", milestones=[make_milestone("v1.0", "u1")]),
        RepositoryMilestones(repository="a/x", milestones=[make_milestone("v1.0", "u1")]),
    ]

    groups = aggregate(repos, re.compile("v1"))

    assert len(groups["v1.0"].members) == 2


def test_aggregation_is_idempotent() -> None:
    repos = _sprint_repositories()
    pattern = re.compile("Sprint")

    first = aggregate(repos, pattern)
    second = aggregate(repos, pattern)

    assert first == second
    assert list(first) == list(second)


def test_failed_repository_equals_empty_contribution() -> None:
    failed = [
        RepositoryMilestones(
            repository="a/x",
            milestones=[],
            failure=FetchFailure(repository="a/x", reason="Not Found", status_code=404),
        ),
        _sprint_repositories()[1],
    ]
    empty = [RepositoryMilestones(repository="a/x", milestones=[]), _sprint_repositories()[1]]
    pattern = re.compile("Sprint")

    assert aggregate(failed, pattern) == aggregate(empty, pattern)


def test_compile_pattern_returns_regex() -> None:
    assert compile_pattern("Sprint \\d+").search("Sprint 12") is not None


def test_compile_pattern_rejects_invalid_syntax() -> None:
    with pytest.raises(PatternError) as exc_info:
        compile_pattern("Sprint (")

    assert exc_info.value.pattern == "Sprint ("
