"""WhatsApp share links (wa.me click-to-chat)."""

from __future__ import annotations

from urllib.parse import quote

from md2wa.errors import Md2WaShareError

DEFAULT_SHARE_BASE_URL = "https://wa.me/"

# Same set encodeURIComponent leaves alone (quote already keeps -_.~)
_SAFE = "!*'()"


def whatsapp_share_url(text: str, base_url: str = DEFAULT_SHARE_BASE_URL) -> str:
    """Build ``<base_url>?text=<encoded text>``. Raises on empty text."""
    if not text or not text.strip():
        raise Md2WaShareError("Nothing to share: output is empty", code="empty_output")
    return f"{base_url}?text={quote(text, safe=_SAFE)}"
