"""Recurrence phrase extraction ("daily", "every 2 weeks", "every last friday")."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Tuple

from quickadd.locales import WEEKDAY_CODES, LanguageConfig, get_language_config
from quickadd.types import MatchSpan

_RulePattern = Tuple["re.Pattern[str]", Callable[["re.Match[str]"], str]]


def _alternation(words: Iterable[str]) -> str:
    return "|".join(re.escape(word) for word in sorted(set(words), key=len, reverse=True))


def _bounded(body: str) -> "re.Pattern[str]":
    return re.compile(rf"(?<!\w){body}(?!\w)", re.IGNORECASE)


@lru_cache(maxsize=None)
def _recurrence_patterns(code: str) -> List[_RulePattern]:
    """Compile the locale's patterns, most specific first."""
    lang = get_language_config(code)
    every = _alternation(lang.every_words)
    other = _alternation(lang.other_words)
    weekdays = _alternation(lang.weekdays)
    plural = _alternation(lang.plural_weekdays)
    ordinals = _alternation(lang.ordinals)
    periods = _alternation(lang.periods)

    def weekday_code(word: str, table: dict) -> str:
        return WEEKDAY_CODES[table[word.lower()]]

    patterns: List[_RulePattern] = []
    if every and ordinals and weekdays:
        patterns.append(
            (
                _bounded(rf"(?:{every})\s+({ordinals})\s+({weekdays})"),
                lambda m: "FREQ=MONTHLY;BYDAY={};BYSETPOS={}".format(
                    weekday_code(m.group(2), lang.weekdays), lang.ordinals[m.group(1).lower()]
                ),
            )
        )
    if every and periods:
        patterns.append(
            (
                _bounded(rf"(?:{every})\s+(\d+)\s+({periods})"),
                lambda m: "FREQ={};INTERVAL={}".format(lang.periods[m.group(2).lower()], int(m.group(1))),
            )
        )
    if every and other and periods:
        patterns.append(
            (
                _bounded(rf"(?:{every})\s+(?:{other})\s+({periods})"),
                lambda m: "FREQ={};INTERVAL=2".format(lang.periods[m.group(1).lower()]),
            )
        )
    if every and weekdays:
        patterns.append(
            (
                _bounded(rf"(?:{every})\s+({weekdays})"),
                lambda m: "FREQ=WEEKLY;BYDAY=" + weekday_code(m.group(1), lang.weekdays),
            )
        )
    if plural:
        patterns.append(
            (
                _bounded(rf"({plural})"),
                lambda m: "FREQ=WEEKLY;BYDAY=" + weekday_code(m.group(1), lang.plural_weekdays),
            )
        )
    for freq, phrases in lang.frequencies.items():
        if phrases:
            patterns.append((_bounded(rf"(?:{_alternation(phrases)})"), lambda m, freq=freq: f"FREQ={freq}"))
    return patterns


def extract_recurrence(text: str, language: LanguageConfig | str | None) -> Optional[Tuple[str, MatchSpan]]:
    """Return the canonical rule and the span of the first matching phrase."""

    if not text:
        return None
    code = language.code if isinstance(language, LanguageConfig) else get_language_config(language).code
    for pattern, handler in _recurrence_patterns(code):
        match = pattern.search(text)
        if not match:
            continue
        rule = handler(match)
        span = MatchSpan(start=match.start(), end=match.end(), matched_source=match.group(0), canonical_id=rule)
        return rule, span
    return None


__all__ = ["extract_recurrence"]
