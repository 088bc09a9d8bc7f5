"""Shared dataclasses for lexicons, trigger settings and extraction results."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

PROPERTY_KINDS = ("status", "priority", "tag", "context", "project")


@dataclass(frozen=True)
class LexiconEntry:
    """One configured status/priority option."""

    value: str
    label: str = ""
    id: str = ""
    is_terminal: bool = False
    order: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            object.__setattr__(self, "id", self.value)
        if not self.label:
            object.__setattr__(self, "label", self.value)

    def surfaces(self) -> List[str]:
        """Return the non-blank match surfaces (value first, then label)."""
        seen: List[str] = []
        for surface in (self.value, self.label):
            if surface and surface.strip() and surface not in seen:
                seen.append(surface)
        return seen


@dataclass(frozen=True)
class TriggerSetting:
    character: str
    enabled: bool = True


_DEFAULT_TRIGGERS: Dict[str, TriggerSetting] = {
    "tag": TriggerSetting("#", True),
    "context": TriggerSetting("@", True),
    "project": TriggerSetting("+", True),
    "status": TriggerSetting("*", True),
    "priority": TriggerSetting("!", False),
}


@dataclass(frozen=True)
class TriggerConfig:
    """Map property kinds to their trigger character.

    Build instances through :meth:`from_mapping` so blank, whitespace-bearing
    or shared trigger characters are disabled instead of failing the parse.
    """

    settings: Mapping[str, TriggerSetting] = field(default_factory=lambda: dict(_DEFAULT_TRIGGERS))

    @classmethod
    def defaults(cls) -> "TriggerConfig":
        return cls(dict(_DEFAULT_TRIGGERS))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object] | None, *, fill_defaults: bool = True) -> "TriggerConfig":
        merged: Dict[str, TriggerSetting] = dict(_DEFAULT_TRIGGERS) if fill_defaults else {}
        for kind, value in (raw or {}).items():
            if kind not in PROPERTY_KINDS:
                logger.warning("Ignoring trigger for unknown property kind %r.", kind)
                continue
            merged[kind] = _coerce_setting(value)

        for kind, setting in list(merged.items()):
            if setting.enabled and (not setting.character.strip() or any(ch.isspace() for ch in setting.character)):
                logger.warning("Disabling %s trigger: blank or whitespace character %r.", kind, setting.character)
                merged[kind] = TriggerSetting(setting.character, False)

        owners: Dict[str, List[str]] = {}
        for kind, setting in merged.items():
            if setting.enabled:
                owners.setdefault(setting.character, []).append(kind)
        for character, kinds in owners.items():
            if len(kinds) < 2:
                continue
            logger.warning("Disabling triggers %s: character %r is shared.", ", ".join(sorted(kinds)), character)
            for kind in kinds:
                merged[kind] = TriggerSetting(character, False)
        return cls(merged)

    def character_for(self, kind: str) -> Optional[str]:
        setting = self.settings.get(kind)
        if setting is None or not setting.enabled:
            return None
        return setting.character

    def enabled_kinds(self) -> Dict[str, str]:
        return {kind: setting.character for kind, setting in self.settings.items() if setting.enabled}


def _coerce_setting(value: object) -> TriggerSetting:
    if isinstance(value, TriggerSetting):
        return value
    if isinstance(value, str):
        return TriggerSetting(value, True)
    if isinstance(value, Mapping):
        character = value.get("character")
        if character is None:
            character = value.get("trigger", "")
        return TriggerSetting(str(character or ""), bool(value.get("enabled", True)))
    return TriggerSetting("", False)


@dataclass(frozen=True)
class MatchSpan:
    start: int
    end: int
    matched_source: str
    canonical_id: str
    via_trigger: bool = False


@dataclass(frozen=True)
class DatePhrase:
    """A temporal phrase found by a date recognizer."""

    start: int
    end: int
    text: str
    value: datetime
    has_time: bool = False


@dataclass
class ExtractionResult:
    title: str = ""
    details: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    due_date: Optional[date] = None
    due_time: Optional[time] = None
    scheduled_date: Optional[date] = None
    scheduled_time: Optional[time] = None
    estimate_minutes: Optional[int] = None
    recurrence_rule: Optional[str] = None
    contexts: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    projects: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        """Render the result with ISO dates and ``HH:MM`` times, omitting absent fields."""
        payload: Dict[str, object] = {
            "title": self.title,
            "contexts": list(self.contexts),
            "tags": list(self.tags),
            "projects": list(self.projects),
        }
        optional = {
            "details": self.details,
            "status": self.status,
            "priority": self.priority,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "due_time": self.due_time.strftime("%H:%M") if self.due_time else None,
            "scheduled_date": self.scheduled_date.isoformat() if self.scheduled_date else None,
            "scheduled_time": self.scheduled_time.strftime("%H:%M") if self.scheduled_time else None,
            "estimate_minutes": self.estimate_minutes,
            "recurrence_rule": self.recurrence_rule,
        }
        for key, value in optional.items():
            if value is not None:
                payload[key] = value
        return payload


@dataclass(frozen=True)
class Suggestion:
    value: str
    label: str
    display: str
    kind: str = "status"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SelectionResult:
    new_text: str
    new_cursor_offset: int


__all__ = [
    "PROPERTY_KINDS",
    "LexiconEntry",
    "TriggerSetting",
    "TriggerConfig",
    "MatchSpan",
    "DatePhrase",
    "ExtractionResult",
    "Suggestion",
    "SelectionResult",
]
