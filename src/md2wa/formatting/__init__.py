"""Markdown to WhatsApp conversion rules and word counting."""

from md2wa.formatting.markdown_to_whatsapp import markdown_to_whatsapp, transform
from md2wa.formatting.rules import RULE_NAMES, RULES, Rule
from md2wa.formatting.word_count import count_words, word_count_level

__all__ = [
    "RULES",
    "RULE_NAMES",
    "Rule",
    "count_words",
    "markdown_to_whatsapp",
    "transform",
    "word_count_level",
]
