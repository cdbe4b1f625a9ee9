"""Custom exceptions for the PR triage bot."""

from __future__ import annotations


class PRTriageError(Exception):
    """Base exception for all triage errors."""


class ConfigError(PRTriageError):
    """Missing or malformed startup inputs."""


class GitHubAPIError(PRTriageError):
    """A call to the hosting API failed."""

    def __init__(self, message: str, status: int | None = None, endpoint: str = ""):
        super().__init__(message)
        self.status = status
        self.endpoint = endpoint


class FatalRuleError(PRTriageError):
    """A decision rule rejected the pull request outright."""


class TitleFormatError(FatalRuleError):
    """Raised when the PR title has no conventional-commit prefix."""

    def __init__(self, title: str):
        super().__init__(f"PR title does not contain a colon: {title}")
        self.title = title


class UnknownPrefixError(FatalRuleError):
    """Raised when the title prefix has no label mapping."""

    def __init__(self, prefix: str):
        super().__init__(f"No matching label for prefix: {prefix}")
        self.prefix = prefix
