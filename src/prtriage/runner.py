"""Triage runner - fetch the PR once, run each rule, execute its action.

Rules run in a fixed order: title label, size label, default assignee,
default reviewers. Title errors and a failed PR fetch propagate to the
caller; every other API failure is logged and only ends the rule it hit.
"""

from __future__ import annotations

import random

from prtriage.config import TriageConfig
from prtriage.exceptions import GitHubAPIError
from prtriage.github.client import GitHubClient
from prtriage.models import (
    Action,
    ActionKind,
    Decision,
    OutcomeStatus,
    PullRequestContext,
    RuleOutcome,
    TriageReport,
)
from prtriage.rules.assignee import decide_default_assignee
from prtriage.rules.reviewers import build_contributor_pool, decide_default_reviewers, needs_reviewers
from prtriage.rules.size import decide_size_label, has_size_label
from prtriage.rules.title import decide_title_label
from prtriage.ui.console import Console

TITLE_RULE = "title-label"
SIZE_RULE = "size-label"
ASSIGNEE_RULE = "default-assignee"
REVIEWER_RULE = "default-reviewers"


class TriageRunner:
    """Applies the four triage rules to a single pull request."""

    def __init__(
        self,
        client: GitHubClient,
        config: TriageConfig | None = None,
        rng: random.Random | None = None,
        console: Console | None = None,
    ) -> None:
        self.client = client
        self.config = config or TriageConfig()
        self.rng = rng or random.Random()
        self.console = console or Console()

    def run(self, pr_number: int) -> TriageReport:
        """Triage one PR.

        Raises:
            GitHubAPIError: If the pull request itself cannot be fetched.
            FatalRuleError: If the title is malformed or unrecognized.
        """
        ctx = self.client.get_pull_request(pr_number)
        self.console.info(f"Triaging PR #{pr_number}: {ctx.title}")

        report = TriageReport(pr_number=pr_number)
        report.outcomes.append(self.apply_title_label(ctx))
        report.outcomes.append(self.apply_size_label(ctx))
        report.outcomes.append(self.assign_default_assignee(ctx))
        report.outcomes.append(self.assign_default_reviewers(ctx))
        return report

    # -- rules -------------------------------------------------------------

    def apply_title_label(self, ctx: PullRequestContext) -> RuleOutcome:
        decision = decide_title_label(ctx, self.config.title_labels)
        return self._execute(TITLE_RULE, ctx, decision, "Added title-based label")

    def apply_size_label(self, ctx: PullRequestContext) -> RuleOutcome:
        # Checked before the file fetch so an existing label costs no request.
        existing = has_size_label(ctx.labels, self.config.size_label_prefix)
        if existing:
            return self._skip(SIZE_RULE, f"PR already has a size label: {existing}")

        try:
            files = self.client.list_pull_request_files(ctx.number)
        except GitHubAPIError as e:
            self.console.warning(f"Failed to list changed files: {e}")
            return RuleOutcome(SIZE_RULE, OutcomeStatus.FAILED, str(e))

        decision = decide_size_label(
            ctx, files, self.config.size_thresholds, self.config.size_label_prefix
        )
        return self._execute(SIZE_RULE, ctx, decision, "Added size label")

    def assign_default_assignee(self, ctx: PullRequestContext) -> RuleOutcome:
        decision = decide_default_assignee(ctx)
        return self._execute(ASSIGNEE_RULE, ctx, decision, "Default assignee added")

    def assign_default_reviewers(self, ctx: PullRequestContext) -> RuleOutcome:
        if not needs_reviewers(ctx):
            return self._skip(REVIEWER_RULE, "PR already has reviewers")

        logins = self.client.list_contributors(on_error=self._contributors_failed)
        pool = build_contributor_pool(logins, ctx.author)
        decision = decide_default_reviewers(ctx, pool, self.rng, self.config.max_reviewers)
        return self._execute(REVIEWER_RULE, ctx, decision, "Default reviewers requested")

    # -- act ---------------------------------------------------------------

    def _contributors_failed(self, error: GitHubAPIError) -> None:
        self.console.warning(f"Failed to list contributors, using partial list: {error}")

    def _skip(self, rule: str, reason: str) -> RuleOutcome:
        self.console.info(reason)
        return RuleOutcome(rule, OutcomeStatus.SKIPPED, reason)

    def _execute(
        self, rule: str, ctx: PullRequestContext, decision: Decision, verb: str
    ) -> RuleOutcome:
        if decision.action is None:
            return self._skip(rule, decision.reason)

        action = decision.action
        try:
            self.perform(ctx.number, action)
        except GitHubAPIError as e:
            self.console.warning(f"{rule} failed: {e}")
            return RuleOutcome(rule, OutcomeStatus.FAILED, str(e), action)

        detail = ", ".join(action.values)
        self.console.success(f"{verb}: {detail}")
        return RuleOutcome(rule, OutcomeStatus.APPLIED, detail, action)

    def perform(self, number: int, action: Action) -> None:
        """Issue the API write for ``action``."""
        values = list(action.values)
        if action.kind == ActionKind.ADD_LABELS:
            self.client.add_labels(number, values)
        elif action.kind == ActionKind.ADD_ASSIGNEES:
            self.client.add_assignees(number, values)
        elif action.kind == ActionKind.REQUEST_REVIEWERS:
            self.client.request_reviewers(number, values)
        else:
            raise ValueError(f"Unknown action kind: {action.kind}")
