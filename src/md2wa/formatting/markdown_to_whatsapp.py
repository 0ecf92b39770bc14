"""Convert LLM-style Markdown to WhatsApp-friendly plain text."""

from __future__ import annotations

import re

from md2wa.formatting.rules import RULES, SHIELD_CLOSE, SHIELD_OPEN, Rule


class _Shelf:
    """Code fragments hidden from the markup rules during one conversion."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def put(self, fragment: str) -> str:
        self._items.append(fragment)
        return f"{SHIELD_OPEN}{len(self._items) - 1}{SHIELD_CLOSE}"

    def take(self, m: re.Match[str]) -> str:
        # Every SHIELD_OPEN left in the text was written by put()
        fragment = self._items[int(m.group(1))]
        # Code fragments may hold shelved input markers
        return m.re.sub(self.take, fragment)


def _apply(rule: Rule, text: str, shelf: _Shelf) -> str:
    if rule.action == "shield":
        return rule.pattern.sub(lambda m: shelf.put(m.expand(rule.replacement)), text)
    if rule.action == "release":
        return rule.pattern.sub(shelf.take, text)
    return rule.pattern.sub(rule.replacement, text)


def markdown_to_whatsapp(content: str) -> str:
    """Rewrite Markdown into WhatsApp formatting. Never raises."""
    if not content or not content.strip():
        return ""

    shelf = _Shelf()
    text = content
    for rule in RULES:
        text = _apply(rule, text, shelf)
    return text


transform = markdown_to_whatsapp
