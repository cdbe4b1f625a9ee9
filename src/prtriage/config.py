"""Configuration management for the PR triage bot."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from prtriage.exceptions import ConfigError

TOKEN_ENV = "GITHUB_TOKEN"
REPOSITORY_ENV = "GITHUB_REPOSITORY"
PR_NUMBER_ENV = "PR_NUMBER"
API_URL_ENV = "GITHUB_API_URL"

DEFAULT_API_URL = "https://api.github.com"

# Conventional-commit prefix -> category label.
TITLE_LABELS: dict[str, str] = {
    "feat": "enhancement",
    "fix": "bug",
    "docs": "documentation",
    "style": "style",
    "refactor": "refactor",
    "perf": "performance",
    "test": "test",
    "chore": "chore",
}

# (upper bound exclusive, label); None marks the catch-all and must come last.
SIZE_THRESHOLDS: list[tuple[int | None, str]] = [
    (200, "D-3"),
    (500, "D-5"),
    (None, "D-7"),
]

SIZE_LABEL_PREFIX = "D-"
MAX_REVIEWERS = 10


class TriageConfig(BaseModel):
    """Fixed decision tables and client tuning."""

    title_labels: dict[str, str] = Field(default_factory=lambda: dict(TITLE_LABELS))
    size_thresholds: list[tuple[int | None, str]] = Field(
        default_factory=lambda: list(SIZE_THRESHOLDS)
    )
    size_label_prefix: str = SIZE_LABEL_PREFIX
    max_reviewers: int = MAX_REVIEWERS
    per_page: int = 100
    request_timeout: float = 30.0


class RunSettings(BaseModel):
    """Startup inputs for a single run."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(repr=False)
    owner: str
    repo: str
    pr_number: int
    api_url: str = DEFAULT_API_URL

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_repository(value: str) -> tuple[str, str]:
    """Split an ``owner/name`` identifier, rejecting anything else."""
    parts = value.split("/")
    if len(parts) != 2 or not all(p.strip() for p in parts):
        raise ConfigError(f"{REPOSITORY_ENV} format invalid: {value!r}")
    return parts[0].strip(), parts[1].strip()


def parse_pr_number(value: str) -> int:
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        raise ConfigError(f"Invalid {PR_NUMBER_ENV}: {value!r}")
    return int(value)


def load_settings(environ: Mapping[str, str] | None = None) -> RunSettings:
    """Read and validate the startup inputs from the environment.

    Raises:
        ConfigError: If any required input is absent or malformed.
    """
    env = os.environ if environ is None else environ

    token = env.get(TOKEN_ENV, "")
    if not token:
        raise ConfigError(f"{TOKEN_ENV} env not set")

    repo_full = env.get(REPOSITORY_ENV, "")
    if not repo_full:
        raise ConfigError(f"{REPOSITORY_ENV} env not set")
    owner, repo = parse_repository(repo_full)

    pr_number_str = env.get(PR_NUMBER_ENV, "")
    if not pr_number_str:
        raise ConfigError(f"{PR_NUMBER_ENV} env not set")
    pr_number = parse_pr_number(pr_number_str)

    api_url = env.get(API_URL_ENV) or DEFAULT_API_URL

    return RunSettings(
        token=token,
        owner=owner,
        repo=repo,
        pr_number=pr_number,
        api_url=api_url.rstrip("/"),
    )
