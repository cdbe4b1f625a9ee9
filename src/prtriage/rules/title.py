"""Title classifier - map a conventional-commit prefix to a category label.

    "feat(api): add pagination"  ->  prefix "feat"  ->  "enhancement"

Malformed titles are rejected outright instead of defaulted, so the
commit-message convention is enforced at the PR gate.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from prtriage.exceptions import TitleFormatError, UnknownPrefixError
from prtriage.models import Action, ActionKind, Decision, PullRequestContext

_SCOPE_RE = re.compile(r"[\(\[\{<].*$")


def parse_title_prefix(title: str) -> str:
    """Return the normalized prefix of ``title``.

    Raises:
        TitleFormatError: If the title has no colon.
    """
    if ":" not in title:
        raise TitleFormatError(title)
    prefix = title.split(":", 1)[0].strip().lower()
    # Drop scope syntax such as "(api)" or "[core]".
    return _SCOPE_RE.sub("", prefix)


def classify_title(title: str, label_map: Mapping[str, str]) -> str:
    """Resolve the category label for ``title``.

    Raises:
        TitleFormatError: If the title has no colon.
        UnknownPrefixError: If the prefix is not in ``label_map``.
    """
    prefix = parse_title_prefix(title)
    label = label_map.get(prefix)
    if label is None:
        raise UnknownPrefixError(prefix)
    return label


def decide_title_label(ctx: PullRequestContext, label_map: Mapping[str, str]) -> Decision:
    label = classify_title(ctx.title, label_map)
    if label in ctx.labels:
        return Decision.skip(f"PR already has label: {label}")
    return Decision(Action(ActionKind.ADD_LABELS, (label,)), f"title prefix maps to {label}")
