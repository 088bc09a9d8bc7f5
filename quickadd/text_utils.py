"""Shared text normalization utilities."""

from __future__ import annotations

from typing import Iterable, Tuple


def collapse_whitespace(value: str) -> str:
    """Collapse whitespace runs into single spaces and trim the ends."""

    return " ".join((value or "").split())


def is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def has_word_boundaries(text: str, start: int, end: int) -> bool:
    """Return True when ``text[start:end]`` is flanked by non-word characters or string edges."""

    if start > 0 and is_word_char(text[start - 1]):
        return False
    if end < len(text) and is_word_char(text[end]):
        return False
    return True


def remove_span(text: str, start: int, end: int) -> str:
    """Cut ``[start, end)`` out of ``text`` and normalise the surrounding whitespace."""

    return collapse_whitespace(text[:start] + " " + text[end:])


def remove_spans(text: str, spans: Iterable[Tuple[int, int]]) -> str:
    """Remove several spans in one pass; overlapping spans are merged."""

    pieces = []
    cursor = 0
    for start, end in sorted(spans):
        if end <= cursor:
            continue
        start = max(start, cursor)
        pieces.append(text[cursor:start])
        cursor = end
    pieces.append(text[cursor:])
    return collapse_whitespace(" ".join(pieces))


__all__ = ["collapse_whitespace", "is_word_char", "has_word_boundaries", "remove_span", "remove_spans"]
