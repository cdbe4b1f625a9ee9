"""Decision rules - pure functions from a PR snapshot to an intended write."""

from prtriage.rules.assignee import decide_default_assignee
from prtriage.rules.reviewers import build_contributor_pool, decide_default_reviewers, sample_reviewers
from prtriage.rules.size import classify_size, decide_size_label, has_size_label, total_changes
from prtriage.rules.title import classify_title, decide_title_label, parse_title_prefix

__all__ = [
    "build_contributor_pool",
    "classify_size",
    "classify_title",
    "decide_default_assignee",
    "decide_default_reviewers",
    "decide_size_label",
    "decide_title_label",
    "has_size_label",
    "parse_title_prefix",
    "sample_reviewers",
    "total_changes",
]
