"""Shared test fixtures for the triage bot."""

from __future__ import annotations

import io
import random
from unittest.mock import Mock

import pytest
from rich.console import Console as RichConsole

from prtriage.config import TriageConfig
from prtriage.github.client import GitHubClient
from prtriage.models import FileStat, PullRequestContext
from prtriage.runner import TriageRunner
from prtriage.ui.console import Console


def make_pr(
    title: str = "feat: add pagination",
    author: str = "alice",
    labels=(),
    assignees=(),
    reviewers=(),
    number: int = 7,
) -> PullRequestContext:
    return PullRequestContext(
        number=number,
        title=title,
        author=author,
        labels=frozenset(labels),
        assignees=frozenset(assignees),
        requested_reviewers=frozenset(reviewers),
    )


def files_totalling(total: int) -> list[FileStat]:
    """Two files whose additions + deletions add up to ``total``."""
    half = total // 2
    return [FileStat(additions=half, deletions=0), FileStat(additions=0, deletions=total - half)]


@pytest.fixture
def quiet_console() -> Console:
    return Console(RichConsole(file=io.StringIO(), width=200))


@pytest.fixture
def client() -> Mock:
    """API client double; every call succeeds and returns nothing interesting."""
    fake = Mock(spec=GitHubClient)
    fake.get_pull_request.return_value = make_pr()
    fake.list_pull_request_files.return_value = files_totalling(10)
    fake.list_contributors.return_value = ["bob", "carol"]
    return fake


@pytest.fixture
def runner(client: Mock, quiet_console: Console) -> TriageRunner:
    return TriageRunner(client, config=TriageConfig(), rng=random.Random(1234), console=quiet_console)
