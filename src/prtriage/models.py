"""Data models shared by the decision rules and the runner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class FileStat:
    """Line counts for one changed file."""

    additions: int = 0
    deletions: int = 0

    @property
    def changes(self) -> int:
        return self.additions + self.deletions


@dataclass(frozen=True)
class PullRequestContext:
    """Snapshot of a pull request, fetched once per run."""

    number: int
    title: str
    author: str
    labels: frozenset[str] = frozenset()
    assignees: frozenset[str] = frozenset()
    requested_reviewers: frozenset[str] = frozenset()

    @classmethod
    def from_github_response(cls, data: dict) -> PullRequestContext:
        return cls(
            number=data.get("number", 0),
            title=data.get("title") or "",
            author=(data.get("user") or {}).get("login", ""),
            labels=frozenset(lb["name"] for lb in data.get("labels") or []),
            assignees=frozenset(a["login"] for a in data.get("assignees") or []),
            requested_reviewers=frozenset(
                r["login"] for r in data.get("requested_reviewers") or []
            ),
        )


class ActionKind(str, Enum):
    """Write operations a rule can ask for."""

    ADD_LABELS = "add_labels"
    ADD_ASSIGNEES = "add_assignees"
    REQUEST_REVIEWERS = "request_reviewers"


@dataclass(frozen=True)
class Action:
    """A single intended write against the pull request."""

    kind: ActionKind
    values: tuple[str, ...]


@dataclass(frozen=True)
class Decision:
    """What a rule wants to do, or why it does nothing."""

    action: Action | None = None
    reason: str = ""

    @classmethod
    def skip(cls, reason: str) -> Decision:
        return cls(action=None, reason=reason)


class OutcomeStatus(str, Enum):
    APPLIED = "applied"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class RuleOutcome:
    """Result of running one rule."""

    rule: str
    status: OutcomeStatus
    detail: str = ""
    action: Action | None = None


@dataclass
class TriageReport:
    """Outcomes for every rule of one run, in execution order."""

    pr_number: int
    outcomes: list[RuleOutcome] = field(default_factory=list)

    def get(self, rule: str) -> RuleOutcome | None:
        for outcome in self.outcomes:
            if outcome.rule == rule:
                return outcome
        return None

    @property
    def failed(self) -> list[RuleOutcome]:
        return [o for o in self.outcomes if o.status == OutcomeStatus.FAILED]
