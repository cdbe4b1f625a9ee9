"""Default assignee rule."""

from __future__ import annotations

from prtriage.models import Action, ActionKind, Decision, PullRequestContext


def decide_default_assignee(ctx: PullRequestContext) -> Decision:
    """Assign the PR author when nobody is assigned yet."""
    if ctx.assignees:
        return Decision.skip("PR already has assignees")
    if not ctx.author:
        return Decision.skip("PR author is unknown")
    return Decision(Action(ActionKind.ADD_ASSIGNEES, (ctx.author,)), f"default assignee {ctx.author}")
