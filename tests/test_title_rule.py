"""Tests for the title classifier."""

from __future__ import annotations

import pytest

from conftest import make_pr
from prtriage.config import TITLE_LABELS
from prtriage.exceptions import FatalRuleError, TitleFormatError, UnknownPrefixError
from prtriage.models import ActionKind
from prtriage.rules.title import classify_title, decide_title_label, parse_title_prefix


class TestParsePrefix:
    def test_simple_prefix(self):
        assert parse_title_prefix("fix: crash on empty input") == "fix"

    def test_whitespace_and_case(self):
        assert parse_title_prefix("  FEAT : shout") == "feat"

    @pytest.mark.parametrize(
        "title",
        ["feat(api): x", "feat[api]: x", "feat{api}: x", "feat<api>: x", "feat(a)[b]: x"],
    )
    def test_scope_is_dropped(self, title: str):
        assert parse_title_prefix(title) == "feat"

    def test_only_first_colon_splits(self):
        assert parse_title_prefix("docs: see note: later") == "docs"

    @pytest.mark.parametrize("title", ["add pagination", "", "feat - no colon"])
    def test_no_colon_raises(self, title: str):
        with pytest.raises(TitleFormatError):
            parse_title_prefix(title)


class TestClassifyTitle:
    @pytest.mark.parametrize("prefix,label", sorted(TITLE_LABELS.items()))
    def test_every_prefix_maps(self, prefix: str, label: str):
        assert classify_title(f"{prefix}: something", TITLE_LABELS) == label

    def test_case_insensitive(self):
        assert classify_title("FEAT: x", TITLE_LABELS) == classify_title("feat: x", TITLE_LABELS)

    def test_scoped_matches_unscoped(self):
        assert classify_title("perf(db): faster", TITLE_LABELS) == classify_title(
            "perf: faster", TITLE_LABELS
        )

    def test_space_before_scope_is_rejected(self):
        with pytest.raises(UnknownPrefixError) as exc:
            classify_title("feat (api): x", TITLE_LABELS)
        assert exc.value.prefix == "feat "

    def test_unknown_prefix(self):
        with pytest.raises(UnknownPrefixError) as exc:
            classify_title("wip: half done", TITLE_LABELS)
        assert exc.value.prefix == "wip"

    def test_errors_are_fatal(self):
        assert issubclass(TitleFormatError, FatalRuleError)
        assert issubclass(UnknownPrefixError, FatalRuleError)


class TestDecideTitleLabel:
    def test_adds_label(self):
        decision = decide_title_label(make_pr(title="fix(ui): button"), TITLE_LABELS)
        assert decision.action is not None
        assert decision.action.kind == ActionKind.ADD_LABELS
        assert decision.action.values == ("bug",)

    def test_existing_label_is_noop(self):
        pr = make_pr(title="docs: readme", labels={"documentation", "D-3"})
        decision = decide_title_label(pr, TITLE_LABELS)
        assert decision.action is None
        assert "documentation" in decision.reason

    def test_malformed_title_raises_even_if_labelled(self):
        with pytest.raises(TitleFormatError):
            decide_title_label(make_pr(title="no colon", labels={"bug"}), TITLE_LABELS)
