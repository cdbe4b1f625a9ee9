"""Thin GitHub REST client covering the endpoints the triage rules touch.

Every call is a single blocking round-trip; nothing is retried. HTTP errors
and transport failures surface as :class:`GitHubAPIError`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import requests

from prtriage.config import DEFAULT_API_URL
from prtriage.exceptions import GitHubAPIError
from prtriage.models import FileStat, PullRequestContext


def make_headers(token: str) -> dict[str, str]:
    """Build standard GitHub HTTP headers for a token."""
    return {
        "Authorization": f"Bearer {token}",
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
        "User-Agent": "pr-triage",
    }


class GitHubClient:
    """GitHub REST client scoped to one repository."""

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        per_page: int = 100,
        session: requests.Session | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.per_page = per_page
        self.session = session or requests.Session()
        self.session.headers.update(make_headers(token))

    @property
    def repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        if not url.startswith("http"):
            url = f"{self.api_url}{url}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise GitHubAPIError(f"{method} {url} failed: {e}", endpoint=url) from e

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = response.text[:200]
            if isinstance(body, dict):
                message = body.get("message", "")
            else:
                message = str(body)[:200]
            raise GitHubAPIError(
                f"{method} {url} returned {response.status_code}: {message}",
                status=response.status_code,
                endpoint=url,
            )
        return response

    def _json(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(
                f"Invalid JSON from {response.url}", status=response.status_code
            ) from e

    def _paginate(
        self,
        path: str,
        on_error: Callable[[GitHubAPIError], None] | None = None,
    ) -> list[Any]:
        """Walk every page of a list endpoint via ``Link: rel="next"``.

        Without ``on_error`` any failing page raises. With it, the error is
        handed over and the items collected so far are returned.
        """
        items: list[Any] = []
        url: str | None = path
        params: dict[str, Any] | None = {"per_page": self.per_page}
        while url:
            try:
                response = self._request("GET", url, params=params)
                page = self._json(response)
            except GitHubAPIError as e:
                if on_error is None:
                    raise
                on_error(e)
                break
            items.extend(page or [])
            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string.
            params = None
        return items

    # -- reads -------------------------------------------------------------

    def get_pull_request(self, number: int) -> PullRequestContext:
        response = self._request("GET", f"{self.repo_path}/pulls/{number}")
        return PullRequestContext.from_github_response(self._json(response))

    def list_pull_request_files(self, number: int) -> list[FileStat]:
        files = self._paginate(f"{self.repo_path}/pulls/{number}/files")
        return [
            FileStat(additions=f.get("additions", 0), deletions=f.get("deletions", 0))
            for f in files
        ]

    def list_contributors(
        self, on_error: Callable[[GitHubAPIError], None] | None = None
    ) -> list[str]:
        """Return contributor logins, best effort when ``on_error`` is given."""
        contributors = self._paginate(f"{self.repo_path}/contributors", on_error=on_error)
        # Anonymous contributors carry no login.
        return [c["login"] for c in contributors if c.get("login")]

    # -- writes ------------------------------------------------------------

    def add_labels(self, number: int, labels: list[str]) -> None:
        self._request("POST", f"{self.repo_path}/issues/{number}/labels", json={"labels": labels})

    def add_assignees(self, number: int, assignees: list[str]) -> None:
        self._request(
            "POST", f"{self.repo_path}/issues/{number}/assignees", json={"assignees": assignees}
        )

    def request_reviewers(self, number: int, reviewers: list[str]) -> None:
        self._request(
            "POST",
            f"{self.repo_path}/pulls/{number}/requested_reviewers",
            json={"reviewers": reviewers},
        )
