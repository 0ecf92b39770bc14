"""Configuration: YAML + env overlay."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from md2wa.errors import Md2WaConfigurationError
from md2wa.formatting.word_count import DEFAULT_LIMIT, DEFAULT_WARNING
from md2wa.share import DEFAULT_SHARE_BASE_URL

# Env keys that override config (loaded once per reload)
_ENV_OVERRIDE_KEYS = (
    "MD2WA_SHARE_BASE_URL",
    "MD2WA_WORD_COUNT_WARNING",
    "MD2WA_WORD_COUNT_LIMIT",
)


def _load_env_overrides() -> dict[str, str]:
    """Load env overrides once per reload."""
    return {k: os.environ.get(k, "") for k in _ENV_OVERRIDE_KEYS}


def load_config(path: str | Path) -> dict[str, Any]:
    """Load config from YAML file. Use SafeLoader. Returns raw dict."""
    path = Path(path)
    if not path.exists():
        logger.warning("Config file not found: {}", path)
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            logger.warning("Config file {} has invalid structure (expected dict)", path)
            return {}
        return data
    except yaml.YAMLError as exc:
        logger.error("Failed to parse config {}: {}", path, exc)
        raise


def load_env_file() -> None:
    """Load the nearest .env, searching up from the working directory."""
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))


def load_config_with_env(path: str | Path) -> dict[str, Any]:
    """Load config from YAML after loading .env into the process env."""
    load_env_file()
    return load_config(path)


class Config:
    """Config accessor with attribute-style access for nested keys."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data or {}
        self._env: dict[str, str] = _load_env_overrides()

    def reload(self, data: dict[str, Any], *, validate: bool = True) -> None:
        """Replace config data and re-read env overrides."""
        self._data = data or {}
        self._env = _load_env_overrides()
        if validate:
            self._validate()
        logger.debug("Config reloaded: {} keys", len(self._data))

    def _validate(self) -> None:
        """Validate config structure; raise Md2WaConfigurationError on failure."""
        word_count = self._data.get("word_count")
        if word_count is not None and not isinstance(word_count, dict):
            raise Md2WaConfigurationError(
                "word_count must be a mapping",
                code="invalid_word_count",
                details={"type": type(word_count).__name__},
            )
        warning = self._threshold("warning", "MD2WA_WORD_COUNT_WARNING", DEFAULT_WARNING)
        limit = self._threshold("limit", "MD2WA_WORD_COUNT_LIMIT", DEFAULT_LIMIT)
        if warning > limit:
            raise Md2WaConfigurationError(
                "word_count.warning must not exceed word_count.limit",
                code="warning_above_limit",
                details={"warning": warning, "limit": limit},
            )
        base_url = self.share_base_url
        if not base_url.startswith(("http://", "https://")):
            raise Md2WaConfigurationError(
                f"share_base_url must be an http(s) URL: {base_url!r}",
                code="invalid_share_base_url",
                details={"share_base_url": base_url},
            )

    def _threshold(self, key: str, env_key: str, default: int) -> int:
        raw: Any = self._env.get(env_key) or self.get(f"word_count.{key}", default)
        if isinstance(raw, bool):
            raw = None
        try:
            value = int(raw)
        except (TypeError, ValueError) as exc:
            raise Md2WaConfigurationError(
                f"word_count.{key} must be an integer",
                code="invalid_threshold",
                details={"key": key, "value": raw},
                original_error=exc,
            ) from exc
        if value <= 0:
            raise Md2WaConfigurationError(
                f"word_count.{key} must be positive",
                code="invalid_threshold",
                details={"key": key, "value": value},
            )
        return value

    @property
    def raw(self) -> dict[str, Any]:
        """Raw config dict."""
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by dot-separated path (e.g. 'word_count.limit')."""
        parts = key.split(".")
        obj: Any = self._data
        for part in parts:
            if isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    @property
    def share_base_url(self) -> str:
        """Base of the WhatsApp share link (env MD2WA_SHARE_BASE_URL wins)."""
        env = self._env.get("MD2WA_SHARE_BASE_URL", "")
        if env:
            return env
        return str(self._data.get("share_base_url", DEFAULT_SHARE_BASE_URL))

    @property
    def word_count_warning(self) -> int:
        """Word count above which the CLI warns."""
        return self._threshold("warning", "MD2WA_WORD_COUNT_WARNING", DEFAULT_WARNING)

    @property
    def word_count_limit(self) -> int:
        """Word count above which the text is likely too long for one message."""
        return self._threshold("limit", "MD2WA_WORD_COUNT_LIMIT", DEFAULT_LIMIT)


# Global config instance (set by __main__)
cfg: Config = Config({})
