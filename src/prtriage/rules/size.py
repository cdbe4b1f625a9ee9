"""Size classifier - attach a review-urgency label from the diff size."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from prtriage.models import Action, ActionKind, Decision, FileStat, PullRequestContext


def total_changes(files: Iterable[FileStat]) -> int:
    """Sum additions and deletions over every changed file."""
    return sum(f.changes for f in files)


def classify_size(total: int, thresholds: Sequence[tuple[int | None, str]]) -> str:
    """Map a change count to a size label.

    Thresholds are exclusive upper bounds checked in order; the first match
    wins and an entry whose bound is ``None`` matches everything.
    """
    for upper, label in thresholds:
        if upper is None or total < upper:
            return label
    raise ValueError("size thresholds need a catch-all entry (bound None)")


def has_size_label(labels: Iterable[str], prefix: str) -> str | None:
    """Return the first existing label carrying the size prefix, if any."""
    for label in sorted(labels):
        if label.startswith(prefix):
            return label
    return None


def decide_size_label(
    ctx: PullRequestContext,
    files: Sequence[FileStat],
    thresholds: Sequence[tuple[int | None, str]],
    prefix: str,
) -> Decision:
    existing = has_size_label(ctx.labels, prefix)
    if existing:
        return Decision.skip(f"PR already has a size label: {existing}")

    total = total_changes(files)
    label = classify_size(total, thresholds)
    return Decision(Action(ActionKind.ADD_LABELS, (label,)), f"{total} lines changed")
