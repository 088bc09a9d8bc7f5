"""Longest-match lexicon lookup for status and priority phrases."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple

from quickadd.locales import LanguageConfig, get_language_config
from quickadd.text_utils import has_word_boundaries, remove_span
from quickadd.types import LexiconEntry, MatchSpan

_Candidate = Tuple[Tuple[int, int, int], MatchSpan]


def find_best_match(
    text: str,
    entries: Sequence[LexiconEntry],
    trigger: Optional[str] = None,
) -> Optional[MatchSpan]:
    """Return the best lexicon span in ``text`` or ``None``.

    WHAT: look up every ``value``/``label`` of ``entries`` in ``text``.
    WHY: status and priority labels are free-form ("Active = Now",
    "(Waiting)"), so plain word regexes are not enough; overlapping labels
    must resolve to the longest one.
    HOW: when ``trigger`` is given, ``trigger + surface`` occurrences win
    outright. Otherwise bare occurrences flanked by non-word characters are
    ranked by surface length (desc), entry order (asc), start offset (asc).
    """
    if not text or not entries:
        return None
    pairs = [(entry, surface) for entry in entries for surface in entry.surfaces()]
    if not pairs:
        return None

    if trigger and trigger.strip():
        triggered = _scan(text, pairs, prefix=trigger, bounded=False)
        if triggered:
            return min(triggered, key=lambda item: item[0])[1]

    bare = _scan(text, pairs, prefix="", bounded=True)
    if bare:
        return min(bare, key=lambda item: item[0])[1]
    return None


def _scan(
    text: str,
    pairs: Iterable[Tuple[LexiconEntry, str]],
    *,
    prefix: str,
    bounded: bool,
) -> List[_Candidate]:
    candidates: List[_Candidate] = []
    for entry, surface in pairs:
        needle = re.compile("(?=(" + re.escape(prefix + surface) + "))", re.IGNORECASE)
        for match in needle.finditer(text):
            start, end = match.start(1), match.end(1)
            if bounded and not has_word_boundaries(text, start, end):
                continue
            span = MatchSpan(
                start=start,
                end=end,
                matched_source=text[start:end],
                canonical_id=entry.id,
                via_trigger=bool(prefix),
            )
            candidates.append(((-len(surface), entry.order, start), span))
    return candidates


@lru_cache(maxsize=None)
def _fallback_entries(locale: str, kind: str) -> Tuple[LexiconEntry, ...]:
    language = get_language_config(locale)
    groups = language.fallback_status if kind == "status" else language.fallback_priority
    entries: List[LexiconEntry] = []
    for order, (group_id, keywords) in enumerate(groups):
        for keyword in keywords:
            entries.append(LexiconEntry(value=keyword, label=keyword, id=group_id, order=order))
    return tuple(entries)


def fallback_entries(kind: str, language: LanguageConfig | str | None = None) -> Tuple[LexiconEntry, ...]:
    """Built-in keyword groups used when a caller supplies an empty lexicon."""

    code = language.code if isinstance(language, LanguageConfig) else get_language_config(language).code
    if kind not in {"status", "priority"}:
        return ()
    return _fallback_entries(code, kind)


def find_fallback_match(
    text: str,
    kind: str,
    language: LanguageConfig | str | None = None,
    trigger: Optional[str] = None,
) -> Optional[MatchSpan]:
    return find_best_match(text, fallback_entries(kind, language), trigger)


def strip_match(text: str, span: MatchSpan) -> str:
    return remove_span(text, span.start, span.end)


__all__ = ["find_best_match", "fallback_entries", "find_fallback_match", "strip_match"]
