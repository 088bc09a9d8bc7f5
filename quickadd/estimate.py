"""Time-estimate extraction ("2 hours 30 minutes", "1h30m", "45min")."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable, List, Optional, Tuple

from quickadd.locales import LanguageConfig, get_language_config
from quickadd.text_utils import remove_span

_EstimatePattern = Tuple["re.Pattern[str]", Callable[["re.Match[str]"], int]]


def _alternation(words: Tuple[str, ...]) -> str:
    return "|".join(re.escape(word) for word in sorted(words, key=len, reverse=True))


@lru_cache(maxsize=None)
def _estimate_patterns(code: str) -> List[_EstimatePattern]:
    language = get_language_config(code)
    hours = _alternation(language.hour_units)
    minutes = _alternation(language.minute_units)
    return [
        (
            re.compile(rf"(?<!\w)(\d+)\s*(?:{hours})\s*(\d+)\s*(?:{minutes})(?!\w)", re.IGNORECASE),
            lambda match: int(match.group(1)) * 60 + int(match.group(2)),
        ),
        (
            re.compile(rf"(?<!\w)(\d+)\s*(?:{hours})(?!\w)", re.IGNORECASE),
            lambda match: int(match.group(1)) * 60,
        ),
        (
            re.compile(rf"(?<!\w)(\d+)\s*(?:{minutes})(?!\w)", re.IGNORECASE),
            lambda match: int(match.group(1)),
        ),
    ]


def extract_estimate(text: str, language: LanguageConfig | str | None) -> Tuple[Optional[int], str]:
    """Return ``(minutes, remaining_text)``; each pattern contributes at most once."""

    code = language.code if isinstance(language, LanguageConfig) else get_language_config(language).code
    working = text
    total = 0
    for pattern, handler in _estimate_patterns(code):
        match = pattern.search(working)
        if not match:
            continue
        total += handler(match)
        working = remove_span(working, match.start(), match.end())
    return (total if total > 0 else None), working


__all__ = ["extract_estimate"]
