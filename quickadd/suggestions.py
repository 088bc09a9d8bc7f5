"""Cursor-relative suggestion helpers for interactive task entry.

Everything here is a pure string/offset transformation so editors and the web
API can share it without any widget state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from quickadd.text_utils import is_word_char
from quickadd.types import LexiconEntry, SelectionResult, Suggestion, TriggerConfig

LIST_KINDS = ("context", "tag", "project")


@dataclass(frozen=True)
class ActiveTrigger:
    kind: str
    character: str
    offset: int
    query: str


def find_trigger_offset(text: str, trigger_char: str, cursor_offset: int) -> Optional[int]:
    """Offset of the last trigger before the cursor with no whitespace in between."""

    if not trigger_char or not trigger_char.strip():
        return None
    before = text[: max(0, min(cursor_offset, len(text)))]
    index = before.rfind(trigger_char)
    if index == -1:
        return None
    if any(char.isspace() for char in before[index + len(trigger_char):]):
        return None
    return index


def has_trigger(text: str, trigger_char: str, cursor_offset: int) -> bool:
    return find_trigger_offset(text, trigger_char, cursor_offset) is not None


def _query_end(text: str, start: int) -> Optional[int]:
    for index in range(start, len(text)):
        if text[index].isspace():
            return index
    return None


def _query_stop(text: str, cursor_offset: int) -> int:
    """First whitespace at/after the cursor, else the cursor itself."""

    cursor = max(0, min(cursor_offset, len(text)))
    end = _query_end(text, cursor)
    return cursor if end is None else end


def extract_query_after_trigger(text: str, trigger_char: str, cursor_offset: int) -> str:
    """Text between the trigger and the first whitespace at/after the cursor.

    When no whitespace follows the cursor yet, the query stops at the cursor.
    """
    offset = find_trigger_offset(text, trigger_char, cursor_offset)
    if offset is None:
        return ""
    return text[offset + len(trigger_char): _query_stop(text, cursor_offset)]


def rank_suggestions(
    query: str,
    entries: Sequence[LexiconEntry],
    limit: int = 10,
    kind: str = "status",
) -> List[Suggestion]:
    """Case-insensitive substring match on value or label, kept in entry order."""

    needle = (query or "").lower()
    ordered = sorted(
        (entry for entry in entries if entry.value.strip() and entry.label.strip()),
        key=lambda entry: entry.order,
    )
    matches = [entry for entry in ordered if needle in entry.value.lower() or needle in entry.label.lower()]
    return [
        Suggestion(value=entry.value, label=entry.label, display=entry.label, kind=kind)
        for entry in matches[: max(0, limit)]
    ]


def apply_selection(
    text: str,
    trigger_char: str,
    trigger_offset: int,
    suggestion: Suggestion,
    insert: str = "label",
    cursor_offset: Optional[int] = None,
) -> SelectionResult:
    """Replace the trigger and the in-progress query with the suggestion.

    With ``cursor_offset`` the replaced span is exactly the query
    :func:`extract_query_after_trigger` reports for that cursor, so characters
    after a mid-word cursor survive. Without it the query runs from the
    trigger to the next whitespace (or the end of the text). Everything after
    the query is kept as-is.
    """
    if trigger_offset < 0 or not text.startswith(trigger_char, trigger_offset):
        return SelectionResult(text, max(0, min(trigger_offset, len(text))))
    inserted = _insertion(trigger_char, suggestion, insert)
    if cursor_offset is not None:
        end = max(_query_stop(text, cursor_offset), trigger_offset + len(trigger_char))
    else:
        end = _query_end(text, trigger_offset + len(trigger_char))
        end = len(text) if end is None else end
    new_text = text[:trigger_offset] + inserted + text[end:]
    return SelectionResult(new_text, trigger_offset + len(inserted))


def _insertion(trigger_char: str, suggestion: Suggestion, insert: str) -> str:
    if suggestion.kind in LIST_KINDS:
        return trigger_char + suggestion.value
    return suggestion.value if insert == "value" else suggestion.label


def is_valid_context(text: str, cursor_offset: int) -> bool:
    """False while the cursor sits inside an open double-quoted span."""

    quotes = 0
    escaped = False
    for char in text[: max(0, cursor_offset)]:
        if escaped:
            escaped = False
            continue
        if char == "\\":
            escaped = True
            continue
        if char == '"':
            quotes += 1
    return quotes % 2 == 0


def detect_active_trigger(text: str, cursor_offset: int, triggers: TriggerConfig) -> Optional[ActiveTrigger]:
    """Pick the most recent enabled trigger that starts a word before the cursor."""

    if not is_valid_context(text, cursor_offset):
        return None
    best: Optional[ActiveTrigger] = None
    for kind, character in triggers.enabled_kinds().items():
        offset = find_trigger_offset(text, character, cursor_offset)
        if offset is None:
            continue
        if offset > 0 and is_word_char(text[offset - 1]):
            continue
        if best is None or offset > best.offset or (offset == best.offset and len(character) > len(best.character)):
            query = extract_query_after_trigger(text, character, cursor_offset)
            best = ActiveTrigger(kind=kind, character=character, offset=offset, query=query)
    return best


class SuggestionService:
    """Bundle lexicons and trigger settings for editor-style completion."""

    def __init__(
        self,
        statuses: Sequence[LexiconEntry] = (),
        priorities: Sequence[LexiconEntry] = (),
        triggers: Optional[TriggerConfig] = None,
        *,
        known_tokens: Optional[Mapping[str, Sequence[str]]] = None,
        insert: str = "label",
        limit: int = 10,
    ) -> None:
        self._triggers = triggers or TriggerConfig.defaults()
        self._insert = insert
        self._limit = limit
        self._lexicons: Dict[str, List[LexiconEntry]] = {
            "status": list(statuses),
            "priority": list(priorities),
        }
        for kind in LIST_KINDS:
            values = (known_tokens or {}).get(kind, ())
            self._lexicons[kind] = [LexiconEntry(value=value, order=index) for index, value in enumerate(values)]

    @property
    def triggers(self) -> TriggerConfig:
        return self._triggers

    def entries_for(self, kind: str) -> List[LexiconEntry]:
        return list(self._lexicons.get(kind, ()))

    def active_trigger(self, text: str, cursor_offset: int) -> Optional[ActiveTrigger]:
        return detect_active_trigger(text, cursor_offset, self._triggers)

    def suggest(self, text: str, cursor_offset: int, kind: Optional[str] = None) -> List[Suggestion]:
        active = self.active_trigger(text, cursor_offset)
        if active is None or (kind is not None and active.kind != kind):
            return []
        return rank_suggestions(active.query, self._lexicons.get(active.kind, []), self._limit, active.kind)

    def apply(self, text: str, cursor_offset: int, suggestion: Suggestion) -> SelectionResult:
        active = self.active_trigger(text, cursor_offset)
        if active is None:
            return SelectionResult(text, cursor_offset)
        return apply_selection(text, active.character, active.offset, suggestion, self._insert, cursor_offset)

    def find_suggestion(self, kind: str, value: str) -> Optional[Suggestion]:
        for entry in self._lexicons.get(kind, []):
            if entry.value == value or entry.id == value:
                return Suggestion(value=entry.value, label=entry.label, display=entry.label, kind=kind)
        return None


__all__ = [
    "ActiveTrigger",
    "LIST_KINDS",
    "SuggestionService",
    "apply_selection",
    "detect_active_trigger",
    "extract_query_after_trigger",
    "find_trigger_offset",
    "has_trigger",
    "is_valid_context",
    "rank_suggestions",
]
