"""md2wa: turn LLM Markdown into text that pastes cleanly into WhatsApp."""

from md2wa.formatting import count_words, markdown_to_whatsapp, transform
from md2wa.share import whatsapp_share_url

__version__ = "2.0.0"

__all__ = [
    "__version__",
    "count_words",
    "markdown_to_whatsapp",
    "transform",
    "whatsapp_share_url",
]
