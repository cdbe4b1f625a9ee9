"""Default reviewer rule - request a bounded random sample of contributors."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

from prtriage.models import Action, ActionKind, Decision, PullRequestContext


def needs_reviewers(ctx: PullRequestContext) -> bool:
    return not ctx.requested_reviewers


def build_contributor_pool(logins: Iterable[str], author: str) -> list[str]:
    """Deduplicate ``logins`` keeping first-seen order and drop the author.

    GitHub logins are case-insensitive, so both checks ignore case.
    """
    author_key = author.lower()
    seen: set[str] = set()
    pool: list[str] = []
    for login in logins:
        key = login.lower()
        if not login or key == author_key or key in seen:
            continue
        seen.add(key)
        pool.append(login)
    return pool


def sample_reviewers(pool: Sequence[str], rng: random.Random, limit: int) -> list[str]:
    """Pick at most ``limit`` distinct reviewers, uniformly at random.

    The whole pool is returned in its original order when it fits.
    """
    if len(pool) <= limit:
        return list(pool)
    return rng.sample(list(pool), limit)


def decide_default_reviewers(
    ctx: PullRequestContext,
    pool: Sequence[str],
    rng: random.Random,
    limit: int,
) -> Decision:
    if not needs_reviewers(ctx):
        return Decision.skip("PR already has reviewers")
    if not pool:
        return Decision.skip("No contributors found")
    reviewers = sample_reviewers(pool, rng, limit)
    return Decision(
        Action(ActionKind.REQUEST_REVIEWERS, tuple(reviewers)),
        f"{len(reviewers)} of {len(pool)} contributors",
    )
