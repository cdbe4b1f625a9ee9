"""Command-line entry point for the PR triage bot.

Meant to run as one step of a pull-request workflow:

    env:
      GITHUB_TOKEN: ${{ secrets.GITHUB_TOKEN }}
      PR_NUMBER: ${{ github.event.pull_request.number }}
    run: pr-triage

Configuration comes only from the environment (see ``prtriage.config``).
"""

from __future__ import annotations

import random
import sys

import click

from prtriage import __version__
from prtriage.config import TriageConfig, load_settings
from prtriage.exceptions import ConfigError, FatalRuleError, GitHubAPIError
from prtriage.github.client import GitHubClient
from prtriage.runner import TriageRunner
from prtriage.ui.console import Console

console = Console()


@click.command()
@click.version_option(version=__version__, prog_name="pr-triage")
def main():
    """Label, assign and request reviewers for the pull request named by PR_NUMBER."""
    try:
        settings = load_settings()
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)

    config = TriageConfig()
    client = GitHubClient(
        token=settings.token,
        owner=settings.owner,
        repo=settings.repo,
        api_url=settings.api_url,
        timeout=config.request_timeout,
        per_page=config.per_page,
    )
    # Fresh entropy per run; sampling is not meant to be reproducible.
    runner = TriageRunner(client, config=config, rng=random.Random(), console=console)

    try:
        report = runner.run(settings.pr_number)
    except GitHubAPIError as e:
        console.error(f"Failed to get PR #{settings.pr_number}: {e}")
        sys.exit(1)
    except FatalRuleError as e:
        console.error(str(e))
        sys.exit(1)

    console.show_report(report)
    if report.failed:
        console.warning(f"{len(report.failed)} rule(s) failed; see messages above")


if __name__ == "__main__":
    main()
