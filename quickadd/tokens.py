"""Trigger-prefixed token lists (``@context``, ``#tag``, ``+project``)."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from quickadd.text_utils import remove_spans


def _token_pattern(trigger: str) -> "re.Pattern[str]":
    escaped = re.escape(trigger)
    return re.compile(rf"{escaped}(\[\[[^\]]+\]\]|[^\s]+)")


def extract_tokens(text: str, trigger_char: Optional[str]) -> Tuple[List[str], str]:
    """Collect every ``trigger+token`` run and return ``(tokens, remaining_text)``.

    Tokens keep their case; duplicates are compared case-insensitively and the
    first spelling wins. ``+[[Wiki Link]]`` style runs may contain spaces. A
    missing or blank trigger skips extraction.
    """
    if not text or not trigger_char or not trigger_char.strip():
        return [], text

    tokens: List[str] = []
    seen: set[str] = set()
    spans: List[Tuple[int, int]] = []
    for match in _token_pattern(trigger_char).finditer(text):
        token = match.group(1)
        spans.append((match.start(), match.end()))
        key = token.casefold()
        if key in seen:
            continue
        seen.add(key)
        tokens.append(token)

    if not spans:
        return [], text
    return tokens, remove_spans(text, spans)


__all__ = ["extract_tokens"]
