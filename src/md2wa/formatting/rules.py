"""Ordered rewrite rules for Markdown -> WhatsApp conversion.

Rules run top to bottom; later rules assume the output shape of earlier ones.
Reordering any two of them means re-checking the whole test suite.
"""

from __future__ import annotations

import re
from typing import Literal, NamedTuple

RuleAction = Literal["replace", "shield", "release"]

# Placeholder wrapping shielded code fragments (Unicode private use area)
SHIELD_OPEN = "\ue000"
SHIELD_CLOSE = "\ue001"

# ASCII alphanumerics plus Latin-1 letters (no × or ÷)
_ALNUM = "[0-9A-Za-zÀ-ÖØ-öø-ÿ]"
# Horizontal whitespace; keeps line-anchored rules on their own line
_HS = r"[^\S\n]"
# Characters that end a URL in running text
_URL_END = r"""[\s"'()\]]"""
# URL scans only start at a token boundary
_URL_START = r"""(?<![^\s"'(\[<])"""


class Rule(NamedTuple):
    """A single pattern/replacement step of the pipeline."""

    name: str
    pattern: re.Pattern[str]
    replacement: str
    action: RuleAction = "replace"


def _rule(
    name: str,
    pattern: str,
    replacement: str = "",
    *,
    flags: int = 0,
    action: RuleAction = "replace",
) -> Rule:
    return Rule(name, re.compile(pattern, flags), replacement, action)


_M = re.MULTILINE

RULES: tuple[Rule, ...] = (
    # --- Line endings ---
    _rule("line_endings", r"\r\n", "\n"),
    # --- Dashes: word—word, word–word, word--word -> word — word ---
    _rule("em_dash", rf"({_ALNUM})—({_ALNUM})", r"\1 — \2"),
    _rule("en_dash", rf"({_ALNUM})–({_ALNUM})", r"\1 — \2"),
    _rule("double_hyphen", rf"({_ALNUM})-\s*-({_ALNUM})", r"\1 — \2"),
    # Only scan a whitespace run from its first character
    _rule("dash_spacing", r"(?<!\s)\s*—\s*", " — "),
    # --- Code (content is shielded until escape cleanup) ---
    # Placeholder characters already in the input are shelved first
    _rule("shield_marker", SHIELD_OPEN, SHIELD_OPEN, action="shield"),
    _rule(
        "code_block_fenced",
        r"```(?:[^\s`]+\n|\n?)([\s\S]*?)```",
        r"\1",
        action="shield",
    ),
    _rule("inline_code", r"`([^`]+)`", r"\1", action="shield"),
    # --- Headings, most specific first ---
    _rule("heading5", rf"^#####{_HS}+", flags=_M),
    _rule("heading4", rf"^####{_HS}+", flags=_M),
    _rule("heading3", rf"^###{_HS}+", flags=_M),
    _rule("heading2", rf"^##{_HS}+", flags=_M),
    _rule("heading1", rf"^#{_HS}+", flags=_M),
    # --- Emphasis; WhatsApp has a single bold level ---
    _rule("bold_italic", r"\*\*\*([^*]+)\*\*\*", r"*\1*"),
    _rule("bold", r"\*\*([^*]+)\*\*", r"*\1*"),
    _rule("strikethrough", r"~~([^~]+)~~", r"~\1~"),
    # --- Links ---
    # [1](https://...) alone on a line is a citation, not link text
    _rule(
        "citation_link",
        rf"^{_HS}*\[(\d+)\]\((https?://[^)\s]+)\){_HS}*$",
        r"[\1] \2",
        flags=_M,
    ),
    _rule(
        "inline_link",
        r"\[([^\[\]]+)\]\(((?:[^()\n]|\([^()\n]*\))+)\)",
        r"\1 (\2)",
    ),
    # [1] [url](url) has become "[1] url (url)" by now
    _rule(
        "citation_duplicate_url",
        rf"^{_HS}*(\[\d+\]){_HS}*(https?://\S+) \(\2\){_HS}*$",
        r"\1 \2",
        flags=_M,
    ),
    _rule(
        "citation_bracket_url",
        rf"^{_HS}*(\[\d+\]){_HS}*\[(https?://[^\]\s]+)\]{_HS}*$",
        r"\1 \2",
        flags=_M,
    ),
    _rule(
        "citation_definition",
        rf'^{_HS}*\[(\d+)\]:{_HS}*(https?://\S+)(?:{_HS}+"[^"\n]*")?{_HS}*$',
        r"[\1] \2",
        flags=_M,
    ),
    # --- Lists ---
    _rule("bullet_dash", rf"^({_HS}*)-{_HS}+", r"\1• ", flags=_M),
    _rule("bullet_asterisk", rf"^({_HS}*)\*{_HS}+(?!{_HS}|\*)", r"\1• ", flags=_M),
    _rule("numbered_list", rf"^({_HS}*)(\d+)\.{_HS}+", r"\1\2. ", flags=_M),
    # --- Blockquotes ---
    _rule("blockquote", rf"^>{_HS}*", "» ", flags=_M),
    # --- Horizontal rules ---
    _rule("hr_dash", rf"^{_HS}*-{{3,}}{_HS}*$", "_____", flags=_M),
    _rule("hr_asterisk", rf"^{_HS}*\*{{3,}}{_HS}*$", "_____", flags=_M),
    _rule("hr_underscore", rf"^{_HS}*_{{3,}}{_HS}*$", "_____", flags=_M),
    # --- URL cleanup ---
    _rule(
        "s3_signed_url",
        rf"""{_URL_START}(https?://[^/\s]*\.s3\.amazonaws\.com/[^?\s"'(\[<]+)\?[^\s\])]+""",
        r"\1",
    ),
    _rule("utm_chatgpt", rf"\?utm_source=chatgpt\.com(?={_URL_END}|$)"),
    _rule("utm_chatgpt_amp", rf"&utm_source=chatgpt\.com(?={_URL_END}|$)"),
    # Separator stays behind for the repairs below
    _rule("utm_general", r"""([?&])utm_[^=&#?\s]+=[^&#\s"]+""", r"\1"),
    _rule("query_question_amp", r"\?&+", "?"),
    _rule("query_double_amp", r"(?<=\S)&{2,}(?=\S)", "&"),
    _rule(
        "query_dangling",
        rf"""{_URL_START}(https?://[^\s"'()\[\]<]*[^\s"'()\[\]<?&])[?&]+(?={_URL_END}|$)""",
        r"\1",
    ),
    # --- Whitespace ---
    _rule("empty_lines", rf"\n(?:{_HS}*\n){{2,}}", "\n\n"),
    _rule(
        "citation_block_start",
        rf"([^\s\[\d])\n(?={_HS}*\[\d+\]{_HS}+\S)",
        r"\1\n\n",
    ),
    _rule(
        "citation_spacing",
        rf"^({_HS}*\[\d+\][^\n]+)\n(?={_HS}*\[\d+\])",
        r"\1\n\n",
        flags=_M,
    ),
    # --- Escapes (shielded code is back from here on) ---
    _rule("code_release", rf"{SHIELD_OPEN}([0-9]{{1,9}}){SHIELD_CLOSE}", action="release"),
    _rule("escape_dollar", r"\\\$", "$"),
    _rule("escape_backslash", r"\\"),
    # --- Trim ---
    _rule("trim_start", r"\A\s+"),
    _rule("trim_end", r"(?<!\s)\s+\Z"),
)

RULE_NAMES: tuple[str, ...] = tuple(rule.name for rule in RULES)
