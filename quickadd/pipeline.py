"""Task-line extraction pipeline.

The phases run in a fixed order over a shrinking working copy of the text:

    status -> priority -> estimate -> date/time -> recurrence -> token lists

Each phase only sees text that earlier phases have already stripped. That is
what keeps a status label such as "Active = Now" from being read as a date, so
the order is part of the behaviour and must not be rearranged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Callable, List, Optional, Sequence, Tuple

from quickadd.dates import DateRecognizer, RuleDateRecognizer, assign_date_slots, extract_date_time_phrases
from quickadd.estimate import extract_estimate
from quickadd.lexicon import fallback_entries, find_best_match, strip_match
from quickadd.locales import LanguageConfig, get_language_config
from quickadd.recurrence import extract_recurrence
from quickadd.text_utils import collapse_whitespace, remove_span
from quickadd.tokens import extract_tokens
from quickadd.types import ExtractionResult, LexiconEntry, TriggerConfig

logger = logging.getLogger(__name__)

Phase = Tuple[str, Callable[[str, ExtractionResult], str]]


@dataclass(frozen=True)
class ParserConfig:
    """Immutable configuration shared by every ``parse`` call."""

    statuses: Tuple[LexiconEntry, ...] = ()
    priorities: Tuple[LexiconEntry, ...] = ()
    triggers: TriggerConfig = field(default_factory=TriggerConfig.defaults)
    locale: str = "en"
    default_to_scheduled: bool = False


class TaskLineParser:
    """Turn one free-form line into an :class:`ExtractionResult`.

    WHAT: run the status, priority, estimate, date/time, recurrence and token
    phases in order and return the structured fields plus the cleaned title.
    WHY: callers (CLI, web API, editors) need identical parsing for the same
    configuration, and the phase order decides correctness.
    HOW: each phase receives the current working text, writes into the result
    and returns the text with its match removed. A failing phase is logged and
    skipped so the rest of the line is still parsed.
    """

    def __init__(
        self,
        statuses: Sequence[LexiconEntry] = (),
        priorities: Sequence[LexiconEntry] = (),
        triggers: Optional[TriggerConfig] = None,
        locale: str = "en",
        *,
        default_to_scheduled: bool = False,
        date_recognizer: Optional[DateRecognizer] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._config = ParserConfig(
            statuses=tuple(statuses),
            priorities=tuple(priorities),
            triggers=triggers or TriggerConfig.defaults(),
            locale=locale,
            default_to_scheduled=default_to_scheduled,
        )
        self._language: LanguageConfig = get_language_config(locale)
        self._recognizer: DateRecognizer = date_recognizer or RuleDateRecognizer()
        self._clock = clock or datetime.now
        self._phases: List[Phase] = [
            ("status", self._extract_status),
            ("priority", self._extract_priority),
            ("estimate", self._extract_estimate),
            ("datetime", self._extract_dates),
            ("recurrence", self._extract_recurrence),
            ("tokens", self._extract_token_lists),
        ]

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def language(self) -> LanguageConfig:
        return self._language

    def parse(self, text: str) -> ExtractionResult:
        result = ExtractionResult()
        working, details = _split_title_and_details(text or "")
        if details:
            result.details = details

        for name, phase in self._phases:
            try:
                working = phase(working, result)
            except Exception:
                logger.debug("Phase %s failed on %r; continuing.", name, working, exc_info=True)

        result.title = collapse_whitespace(working)
        return result

    # -- phases ---------------------------------------------------------------
    def _extract_lexicon(self, kind: str, entries: Sequence[LexiconEntry], text: str) -> Tuple[Optional[str], str]:
        lexicon = entries or fallback_entries(kind, self._language)
        span = find_best_match(text, lexicon, self._config.triggers.character_for(kind))
        if span is None:
            return None, text
        return span.canonical_id, strip_match(text, span)

    def _extract_status(self, text: str, result: ExtractionResult) -> str:
        status, text = self._extract_lexicon("status", self._config.statuses, text)
        if status is not None:
            result.status = status
        return text

    def _extract_priority(self, text: str, result: ExtractionResult) -> str:
        priority, text = self._extract_lexicon("priority", self._config.priorities, text)
        if priority is not None:
            result.priority = priority
        return text

    def _extract_estimate(self, text: str, result: ExtractionResult) -> str:
        minutes, text = extract_estimate(text, self._language)
        if minutes:
            result.estimate_minutes = minutes
        return text

    def _extract_dates(self, text: str, result: ExtractionResult) -> str:
        phrases = extract_date_time_phrases(
            text,
            self._language.code,
            self._recognizer,
            self._clock(),
            trigger_chars=self._config.triggers.enabled_kinds().values(),
        )
        assignment = assign_date_slots(text, phrases, self._language.code, self._config.default_to_scheduled)

        def setter(slot: str, day: Optional[date], clock: Optional[time]) -> None:
            setattr(result, f"{slot}_date", day)
            setattr(result, f"{slot}_time", clock)

        assignment.apply(setter)
        return assignment.remaining_text

    def _extract_recurrence(self, text: str, result: ExtractionResult) -> str:
        found = extract_recurrence(text, self._language)
        if not found:
            return text
        rule, span = found
        result.recurrence_rule = rule
        return remove_span(text, span.start, span.end)

    def _extract_token_lists(self, text: str, result: ExtractionResult) -> str:
        for kind, target in (("context", result.contexts), ("tag", result.tags), ("project", result.projects)):
            tokens, text = extract_tokens(text, self._config.triggers.character_for(kind))
            target.extend(tokens)
        return text


def _split_title_and_details(text: str) -> Tuple[str, Optional[str]]:
    """Only the first line is parsed; the rest is returned as details."""
    stripped = text.strip()
    head, _, tail = stripped.partition("\n")
    details = tail.strip()
    return head.strip(), (details or None)


def parse_task_line(
    text: str,
    statuses: Sequence[LexiconEntry] = (),
    priorities: Sequence[LexiconEntry] = (),
    triggers: Optional[TriggerConfig] = None,
    locale: str = "en",
    **options,
) -> ExtractionResult:
    """One-shot helper around :class:`TaskLineParser`."""

    return TaskLineParser(statuses, priorities, triggers, locale, **options).parse(text)


__all__ = ["ParserConfig", "TaskLineParser", "parse_task_line"]
