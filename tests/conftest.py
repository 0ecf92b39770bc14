"""Shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_md2wa_env(monkeypatch):
    """Keep MD2WA_* variables from the host out of config tests."""
    for key in ("MD2WA_SHARE_BASE_URL", "MD2WA_WORD_COUNT_WARNING", "MD2WA_WORD_COUNT_LIMIT"):
        monkeypatch.delenv(key, raising=False)
