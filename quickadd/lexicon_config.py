"""Load status/priority lexicons and trigger settings from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

import yaml

from quickadd.locales import DEFAULT_LOCALE
from quickadd.types import LexiconEntry, TriggerConfig

logger = logging.getLogger(__name__)

DEFAULT_LEXICON_CONFIG = Path("config/lexicons.yml")


@dataclass(frozen=True)
class LexiconConfig:
    """Everything a parser or suggestion service needs from the config file."""

    statuses: Tuple[LexiconEntry, ...] = ()
    priorities: Tuple[LexiconEntry, ...] = ()
    triggers: TriggerConfig = field(default_factory=TriggerConfig.defaults)
    locale: str = DEFAULT_LOCALE
    known_tokens: Dict[str, Tuple[str, ...]] = field(default_factory=dict)


def load_lexicon_config(path: Path | str | None = None) -> LexiconConfig:
    """Parse ``path`` (default ``config/lexicons.yml``) into a :class:`LexiconConfig`.

    Missing files and non-mapping documents raise; individual malformed
    entries are skipped with a warning.
    """
    target = Path(path) if path else DEFAULT_LEXICON_CONFIG
    if not target.exists():
        raise FileNotFoundError(f"Lexicon config not found: {target}")

    data = yaml.safe_load(target.read_text(encoding="utf-8"))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Lexicon config {target} must be a mapping at the top level.")

    triggers_payload = data.get("triggers") or {}
    if not isinstance(triggers_payload, dict):
        raise ValueError("Lexicon config 'triggers' must be a mapping of kind -> character.")

    locale = data.get("locale") or DEFAULT_LOCALE
    return LexiconConfig(
        statuses=_parse_entries(data.get("statuses"), "statuses"),
        priorities=_parse_entries(data.get("priorities"), "priorities"),
        triggers=TriggerConfig.from_mapping(triggers_payload),
        locale=str(locale),
        known_tokens=_parse_known_tokens(data.get("known")),
    )


def _parse_entries(payload: object, section: str) -> Tuple[LexiconEntry, ...]:
    if payload is None:
        return ()
    if not isinstance(payload, list):
        raise ValueError(f"Lexicon config '{section}' must be a list.")

    entries: List[LexiconEntry] = []
    for index, raw in enumerate(payload):
        if isinstance(raw, str):
            raw = {"value": raw}
        if not isinstance(raw, dict):
            logger.warning("Skipping %s entry #%d: expected a mapping, got %r.", section, index, raw)
            continue
        value = str(raw.get("value") or "").strip()
        if not value:
            logger.warning("Skipping %s entry #%d: missing value.", section, index)
            continue
        entries.append(
            LexiconEntry(
                value=value,
                label=str(raw.get("label") or "").strip(),
                id=str(raw.get("id") or "").strip(),
                is_terminal=bool(raw.get("is_terminal", False)),
                order=_as_int(raw.get("order"), index),
            )
        )
    return tuple(entries)


def _parse_known_tokens(payload: object) -> Dict[str, Tuple[str, ...]]:
    if not isinstance(payload, dict):
        return {}
    known: Dict[str, Tuple[str, ...]] = {}
    for kind in ("context", "tag", "project"):
        values = payload.get(kind) or payload.get(f"{kind}s") or []
        if isinstance(values, list):
            known[kind] = tuple(str(value).strip() for value in values if str(value).strip())
    return known


def _as_int(raw: object, default: int) -> int:
    try:
        return int(raw) if raw is not None else default
    except (TypeError, ValueError):
        return default


__all__ = ["DEFAULT_LEXICON_CONFIG", "LexiconConfig", "load_lexicon_config"]
