"""Centralize defaults and environment lookups for the quick-add entry points."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Default configuration values
# ---------------------------------------------------------------------------
_DEFAULT_LOCALE = "en"
_DEFAULT_LEXICON_CONFIG = "config/lexicons.yml"
_DEFAULT_TO_SCHEDULED: bool = False
_DEFAULT_DATE_BACKEND = "rules"
_DATE_BACKENDS = ("rules", "dateparser")
_DEFAULT_SUGGESTION_LIMIT = 10
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_WEB_HOST = "127.0.0.1"
_DEFAULT_WEB_PORT = 9000


def _parse_bool(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {"0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


# ---------------------------------------------------------------------------
# Environment-derived settings
# ---------------------------------------------------------------------------
def get_locale(env: Dict[str, str] | None = None, default: str = _DEFAULT_LOCALE) -> str:
    """Return the locale code used for date, recurrence and fallback keywords.

    Args:
        env: Optional mapping used instead of ``os.environ`` to simplify testing.
        default: Returned when ``QUICKADD_LOCALE`` is unset or blank.
    """

    source = env if env is not None else os.environ
    raw = (source.get("QUICKADD_LOCALE") or "").strip()
    return raw or default


def get_lexicon_config_path(env: Dict[str, str] | None = None) -> Path:
    """Return the YAML file holding statuses, priorities and triggers."""

    source = env if env is not None else os.environ
    override = source.get("QUICKADD_LEXICON_CONFIG")
    return Path(override) if override else Path(_DEFAULT_LEXICON_CONFIG)


def is_default_to_scheduled(env: Dict[str, str] | None = None) -> bool:
    """Determine whether an uncued date lands in the scheduled slot instead of due."""

    source = env if env is not None else os.environ
    return _parse_bool(source.get("QUICKADD_DEFAULT_TO_SCHEDULED"), _DEFAULT_TO_SCHEDULED)


def get_date_backend(env: Dict[str, str] | None = None) -> str:
    source = env if env is not None else os.environ
    raw = (source.get("QUICKADD_DATE_BACKEND") or "").strip().lower()
    return raw if raw in _DATE_BACKENDS else _DEFAULT_DATE_BACKEND


def get_suggestion_limit(env: Dict[str, str] | None = None) -> int:
    """Return how many suggestions the picker shows at once."""

    source = env if env is not None else os.environ
    raw = source.get("QUICKADD_SUGGESTION_LIMIT")
    if raw is None:
        return _DEFAULT_SUGGESTION_LIMIT
    try:
        value = int(raw)
    except ValueError:
        return _DEFAULT_SUGGESTION_LIMIT
    return value if value > 0 else _DEFAULT_SUGGESTION_LIMIT


def get_log_level(env: Dict[str, str] | None = None) -> int:
    source = env if env is not None else os.environ
    raw = (source.get("QUICKADD_LOG_LEVEL") or _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.WARNING


def get_web_host(env: Dict[str, str] | None = None) -> str:
    source = env if env is not None else os.environ
    return source.get("QUICKADD_WEB_HOST", _DEFAULT_WEB_HOST)


def get_web_port(env: Dict[str, str] | None = None) -> int:
    source = env if env is not None else os.environ
    raw = source.get("QUICKADD_WEB_PORT")
    if raw is None:
        return _DEFAULT_WEB_PORT
    try:
        value = int(raw)
    except ValueError:
        return _DEFAULT_WEB_PORT
    return value if 0 < value <= 65535 else _DEFAULT_WEB_PORT


__all__ = [
    "get_date_backend",
    "get_lexicon_config_path",
    "get_locale",
    "get_log_level",
    "get_suggestion_limit",
    "get_web_host",
    "get_web_port",
    "is_default_to_scheduled",
]
