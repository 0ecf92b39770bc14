"""Tests for the rule table itself: ordering and per-rule behavior."""

from __future__ import annotations

import re

import pytest

from md2wa.formatting.rules import RULE_NAMES, RULES, Rule

_BY_NAME = {rule.name: rule for rule in RULES}


def _apply(name: str, text: str) -> str:
    rule = _BY_NAME[name]
    return rule.pattern.sub(rule.replacement, text)


class TestRuleTable:
    def test_names_unique(self):
        assert len(RULE_NAMES) == len(set(RULE_NAMES))

    def test_rules_are_compiled_and_typed(self):
        for rule in RULES:
            assert isinstance(rule, Rule)
            assert isinstance(rule.pattern, re.Pattern)
            assert rule.action in ("replace", "shield", "release")

    def test_rules_are_immutable(self):
        with pytest.raises(AttributeError):
            RULES[0].name = "other"  # type: ignore[misc]

    def test_line_endings_first_and_trim_last(self):
        assert RULE_NAMES[0] == "line_endings"
        assert RULE_NAMES[-2:] == ("trim_start", "trim_end")

    @pytest.mark.parametrize(
        "earlier,later",
        [
            ("dash_spacing", "shield_marker"),
            ("shield_marker", "code_block_fenced"),
            ("code_block_fenced", "inline_code"),
            ("inline_code", "heading1"),
            ("heading5", "heading1"),
            ("heading1", "bold"),
            ("bold_italic", "bold"),
            ("citation_link", "inline_link"),
            ("inline_link", "citation_duplicate_url"),
            ("citation_definition", "bullet_dash"),
            ("bold", "bullet_asterisk"),
            ("bullet_dash", "hr_dash"),
            ("blockquote", "hr_dash"),
            ("hr_underscore", "s3_signed_url"),
            ("utm_general", "query_question_amp"),
            ("query_dangling", "empty_lines"),
            ("citation_spacing", "code_release"),
            ("code_release", "escape_dollar"),
            ("escape_dollar", "escape_backslash"),
        ],
    )
    def test_relative_order(self, earlier, later):
        assert RULE_NAMES.index(earlier) < RULE_NAMES.index(later)

    def test_only_code_rules_shield(self):
        shielding = [rule.name for rule in RULES if rule.action == "shield"]
        assert shielding == ["shield_marker", "code_block_fenced", "inline_code"]
        releasing = [rule.name for rule in RULES if rule.action == "release"]
        assert releasing == ["code_release"]


class TestLinkRules:
    @pytest.mark.parametrize(
        "name,text,expected",
        [
            ("citation_link", "[1](https://a.com)", "[1] https://a.com"),
            ("citation_link", "  [12](http://a.com/x)  ", "[12] http://a.com/x"),
            ("citation_duplicate_url", "[1] https://a.com (https://a.com)", "[1] https://a.com"),
            ("citation_bracket_url", "[1] [https://a.com]", "[1] https://a.com"),
            ("citation_definition", '[1]: https://a.com "T"', "[1] https://a.com"),
            ("inline_link", "[t](https://a.com)", "t (https://a.com)"),
        ],
    )
    def test_rewrite(self, name, text, expected):
        assert _apply(name, text) == expected

    @pytest.mark.parametrize(
        "name,text",
        [
            ("citation_link", "[1](https://a.com)\n[2](https://b.com)"),
            ("citation_duplicate_url", "[1] https://a.com (https://a.com)"),
            ("citation_bracket_url", "[1] [https://a.com]"),
            ("citation_definition", '[1]: https://a.com "T"\n[2]: https://b.com'),
        ],
    )
    def test_idempotent(self, name, text):
        once = _apply(name, text)
        assert _apply(name, once) == once

    def test_citation_link_is_line_local(self):
        text = "intro\n\n[1](https://a.com)\n\nmore"
        assert _apply("citation_link", text) == "intro\n\n[1] https://a.com\n\nmore"

    def test_duplicate_needs_same_url(self):
        text = "[1] https://a.com (https://b.com)"
        assert _apply("citation_duplicate_url", text) == text

    def test_citation_link_needs_http_target(self):
        assert _apply("citation_link", "[1](#anchor)") == "[1](#anchor)"


class TestWhitespaceRules:
    def test_dash_spacing_spans_line_break(self):
        assert _apply("dash_spacing", "word\n— next") == "word — next"

    def test_empty_lines_leaves_two_newlines(self):
        assert _apply("empty_lines", "a\n\n\n\n\nb") == "a\n\nb"

    def test_citation_block_start_after_digit_skipped(self):
        text = "in 2024\n[1] https://a.com"
        assert _apply("citation_block_start", text) == text

    def test_citation_spacing_chain(self):
        text = "[1] a\n[2] b\n[3] c"
        assert _apply("citation_spacing", text) == "[1] a\n\n[2] b\n\n[3] c"

    def test_trim_end_only_at_end(self):
        assert _apply("trim_end", "a   b  \n") == "a   b"
