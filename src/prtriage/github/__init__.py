"""GitHub REST access for the triage bot."""

from prtriage.github.client import GitHubClient, make_headers

__all__ = ["GitHubClient", "make_headers"]
