"""Date/time phrase recognition and due/scheduled slot assignment."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from functools import lru_cache
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Tuple

from dateparser.search import search_dates

from quickadd.locales import LanguageConfig, get_language_config
from quickadd.text_utils import remove_spans
from quickadd.types import DatePhrase

logger = logging.getLogger(__name__)

_ISO_PATTERN = re.compile(r"(?<![\w-])(\d{4})-(\d{2})-(\d{2})(?![\w-])")
_NUMERIC_PATTERN = re.compile(r"(?<![\w./-])(\d{1,2})([./])(\d{1,2})(?:\2(\d{2}|\d{4}))?(?![\w/-]|\.\d)")
_NUMERIC_DASH_PATTERN = re.compile(r"(?<![\w./-])(\d{1,2})-(\d{1,2})-(\d{2}|\d{4})(?![\w./-])")
_ORDINAL_SUFFIX = r"(?:st|nd|rd|th|er|\.)?"


class DateRecognizer(Protocol):
    """Collaborator that finds temporal phrases in free text."""

    def recognize(self, text: str, locale: str, reference: datetime) -> List[DatePhrase]:
        ...


@dataclass
class _Candidate:
    start: int
    end: int
    day: Optional[date] = None
    clock: Optional[time] = None


def _alternation(words) -> str:
    return "|".join(re.escape(word) for word in sorted(set(words), key=len, reverse=True))


def _year(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    value = int(raw)
    return value + 2000 if value < 100 else value


def _forward(month: int, day: int, year: Optional[int], reference: date) -> Optional[date]:
    """Build a date; a yearless date already in the past rolls to next year."""
    try:
        if year is not None:
            return date(year, month, day)
        candidate = date(reference.year, month, day)
        if candidate < reference:
            candidate = date(reference.year + 1, month, day)
        return candidate
    except ValueError:
        return None


@dataclass(frozen=True)
class _LocalePatterns:
    relative: Optional["re.Pattern[str]"]
    now: Optional["re.Pattern[str]"]
    in_units: Optional["re.Pattern[str]"]
    weekday: Optional["re.Pattern[str]"]
    month_day: Optional["re.Pattern[str]"]
    day_month: Optional["re.Pattern[str]"]
    recurring_prefix: Optional["re.Pattern[str]"]
    times: Tuple["re.Pattern[str]", ...] = field(default_factory=tuple)


@lru_cache(maxsize=None)
def _locale_patterns(code: str) -> _LocalePatterns:
    lang = get_language_config(code)
    relative = _alternation(lang.relative_days)
    now_words = _alternation(lang.now_words)
    months = _alternation(lang.months)
    weekdays = _alternation(lang.weekdays)
    modifiers = _alternation(lang.next_words + lang.this_words)
    in_words = _alternation(lang.in_words)
    units = _alternation(lang.day_units + lang.week_units)
    every = _alternation(lang.every_words)
    cues = _alternation(lang.time_cues)
    joiners = _alternation(lang.month_joiners)
    joiner = rf"(?:(?:{joiners})\s+)?" if joiners else ""
    cue_prefix = rf"(?:(?:{cues})\s*)?" if cues else ""

    times: List["re.Pattern[str]"] = []
    if lang.uses_meridiem:
        times.append(
            re.compile(rf"(?<!\w){cue_prefix}(?P<hour>\d{{1,2}})(?::(?P<minute>\d{{2}}))?\s*(?P<meridiem>am|pm|a\.m\.|p\.m\.)(?!\w)", re.IGNORECASE)
        )
    times.append(re.compile(rf"(?<![\w:]){cue_prefix}(?P<hour>\d{{1,2}})[:](?P<minute>\d{{2}})(?![\w:])", re.IGNORECASE))
    if cues:
        times.append(re.compile(rf"(?<!\w)(?:{cues})\s*(?P<hour>\d{{1,2}})(?:[.](?P<minute>\d{{2}}))?(?![\w:])", re.IGNORECASE))

    def bounded(body: str) -> "re.Pattern[str]":
        return re.compile(rf"(?<!\w){body}(?!\w)", re.IGNORECASE)

    return _LocalePatterns(
        relative=bounded(rf"(?P<word>{relative})") if relative else None,
        now=bounded(rf"(?:{now_words})") if now_words else None,
        in_units=bounded(rf"(?:{in_words})\s+(?P<count>\d+)\s+(?P<unit>{units})") if in_words and units else None,
        weekday=bounded(rf"(?:(?P<modifier>{modifiers})\s+)?(?P<weekday>{weekdays})") if weekdays else None,
        month_day=bounded(rf"(?P<month>{months})\.?\s+(?P<day>\d{{1,2}}){_ORDINAL_SUFFIX}(?:,?\s+(?P<year>\d{{4}}))?") if months else None,
        day_month=bounded(rf"(?P<day>\d{{1,2}}){_ORDINAL_SUFFIX}\s*{joiner}(?P<month>{months})\.?(?:,?\s+(?P<year>\d{{4}}))?") if months else None,
        recurring_prefix=re.compile(rf"(?<!\w)(?:{every})\s+(?:\S+\s+)?$", re.IGNORECASE) if every else None,
        times=tuple(times),
    )


class RuleDateRecognizer:
    """Deterministic regex recognizer built from the locale keyword tables.

    Recognises relative day words, ``now``, ``in N days/weeks``, weekday names
    (optionally with ``next``/``this``), ISO and numeric dates, month-name
    dates, and clock times that either attach to an adjacent date or stand
    alone on the reference day.
    """

    def recognize(self, text: str, locale: str, reference: datetime) -> List[DatePhrase]:
        if not text:
            return []
        lang = get_language_config(locale)
        patterns = _locale_patterns(lang.code)
        today = reference.date()

        dates = _select(self._date_candidates(text, lang, patterns, reference))
        clocks = [
            candidate
            for candidate in _select(self._time_candidates(text, patterns))
            if not any(_overlaps(candidate, existing) for existing in dates)
        ]

        phrases: List[DatePhrase] = []
        used_clocks: set[int] = set()
        for candidate in dates:
            start, end, clock = candidate.start, candidate.end, candidate.clock
            if clock is None:
                for index, other in enumerate(clocks):
                    if index in used_clocks:
                        continue
                    if other.start >= end and _is_gap(text[end:other.start]):
                        end, clock = other.end, other.clock
                        used_clocks.add(index)
                        break
                    if other.end <= start and _is_gap(text[other.end:start]):
                        start, clock = other.start, other.clock
                        used_clocks.add(index)
                        break
            phrases.append(_phrase(text, start, end, candidate.day or today, clock))

        for index, other in enumerate(clocks):
            if index not in used_clocks:
                phrases.append(_phrase(text, other.start, other.end, today, other.clock))
        phrases.sort(key=lambda phrase: phrase.start)
        return phrases

    def _date_candidates(
        self,
        text: str,
        lang: LanguageConfig,
        patterns: _LocalePatterns,
        reference: datetime,
    ) -> List[_Candidate]:
        today = reference.date()
        found: List[_Candidate] = []

        for match in _ISO_PATTERN.finditer(text):
            day = _forward(int(match.group(2)), int(match.group(3)), int(match.group(1)), today)
            if day:
                found.append(_Candidate(match.start(), match.end(), day))

        for match in _NUMERIC_PATTERN.finditer(text):
            if match.group(2) == "." and not _is_dotted_date(match, lang):
                continue
            first, second = int(match.group(1)), int(match.group(3))
            day_value, month_value = (first, second) if lang.day_first else (second, first)
            day = _forward(month_value, day_value, _year(match.group(4)), today)
            if day:
                found.append(_Candidate(match.start(), match.end(), day))

        for match in _NUMERIC_DASH_PATTERN.finditer(text):
            first, second = int(match.group(1)), int(match.group(2))
            day_value, month_value = (first, second) if lang.day_first else (second, first)
            day = _forward(month_value, day_value, _year(match.group(3)), today)
            if day:
                found.append(_Candidate(match.start(), match.end(), day))

        for pattern in (patterns.month_day, patterns.day_month):
            if pattern is None:
                continue
            for match in pattern.finditer(text):
                month_value = lang.months[match.group("month").lower()]
                day = _forward(month_value, int(match.group("day")), _year(match.group("year")), today)
                if day:
                    found.append(_Candidate(match.start(), match.end(), day))

        if patterns.relative is not None:
            for match in patterns.relative.finditer(text):
                offset = lang.relative_days[match.group("word").lower()]
                found.append(_Candidate(match.start(), match.end(), today + timedelta(days=offset)))

        if patterns.now is not None:
            for match in patterns.now.finditer(text):
                clock = reference.time().replace(second=0, microsecond=0)
                found.append(_Candidate(match.start(), match.end(), today, clock))

        if patterns.in_units is not None:
            for match in patterns.in_units.finditer(text):
                count = int(match.group("count"))
                unit = match.group("unit").lower()
                days = count * 7 if unit in lang.week_units else count
                found.append(_Candidate(match.start(), match.end(), today + timedelta(days=days)))

        if patterns.weekday is not None:
            for match in patterns.weekday.finditer(text):
                if patterns.recurring_prefix is not None and patterns.recurring_prefix.search(text[: match.start()]):
                    continue
                target = lang.weekdays[match.group("weekday").lower()]
                ahead = (target - today.weekday()) % 7
                modifier = (match.group("modifier") or "").lower()
                if modifier in lang.next_words and ahead == 0:
                    ahead = 7
                found.append(_Candidate(match.start(), match.end(), today + timedelta(days=ahead)))
        return found

    def _time_candidates(self, text: str, patterns: _LocalePatterns) -> List[_Candidate]:
        found: List[_Candidate] = []
        for pattern in patterns.times:
            for match in pattern.finditer(text):
                clock = _clock(match)
                if clock is not None:
                    found.append(_Candidate(match.start(), match.end(), None, clock))
        return found


def _clock(match: "re.Match[str]") -> Optional[time]:
    hour = int(match.group("hour"))
    minute = int(match.group("minute") or 0)
    meridiem = (match.groupdict().get("meridiem") or "").lower().replace(".", "")
    if meridiem:
        if not 1 <= hour <= 12:
            return None
        if meridiem == "pm" and hour != 12:
            hour += 12
        elif meridiem == "am" and hour == 12:
            hour = 0
    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


def _is_dotted_date(match: "re.Match[str]", lang: LanguageConfig) -> bool:
    """``25.12`` is a date in day-first locales; ``2.5`` and ``1.2`` never are."""
    if not lang.day_first:
        return False
    if match.group(4):
        return True
    return not (len(match.group(1)) == 1 and len(match.group(3)) == 1)


def _overlaps(left: _Candidate, right: _Candidate) -> bool:
    return left.start < right.end and right.start < left.end


def _select(candidates: List[_Candidate]) -> List[_Candidate]:
    """Keep non-overlapping candidates, longest first, then leftmost."""
    chosen: List[_Candidate] = []
    for candidate in sorted(candidates, key=lambda c: (-(c.end - c.start), c.start)):
        if not any(_overlaps(candidate, existing) for existing in chosen):
            chosen.append(candidate)
    return sorted(chosen, key=lambda c: c.start)


def _is_gap(between: str) -> bool:
    return not between.strip(" ,")


def _phrase(text: str, start: int, end: int, day: date, clock: Optional[time]) -> DatePhrase:
    return DatePhrase(
        start=start,
        end=end,
        text=text[start:end],
        value=datetime.combine(day, clock or time(0, 0)),
        has_time=clock is not None,
    )


class DateparserRecognizer:
    """Adapter over ``dateparser.search.search_dates`` for broader language coverage."""

    _TIME_HINT = re.compile(r"\d{1,2}[:.]\d{2}|\d\s*(?:am|pm)\b|\bnoon\b|\bmidnight\b|\bnow\b", re.IGNORECASE)

    def __init__(self, settings: Optional[Dict[str, object]] = None) -> None:
        self._settings = {"PREFER_DATES_FROM": "future", "RETURN_AS_TIMEZONE_AWARE": False}
        self._settings.update(settings or {})

    def recognize(self, text: str, locale: str, reference: datetime) -> List[DatePhrase]:
        if not text:
            return []
        settings = dict(self._settings)
        settings["RELATIVE_BASE"] = reference
        results = search_dates(text, languages=[locale], settings=settings) or []

        phrases: List[DatePhrase] = []
        cursor = 0
        for matched, value in results:
            start = text.find(matched, cursor)
            if start == -1:
                continue
            end = start + len(matched)
            cursor = end
            phrases.append(
                DatePhrase(
                    start=start,
                    end=end,
                    text=matched,
                    value=value,
                    has_time=bool(self._TIME_HINT.search(matched)),
                )
            )
        return phrases


def extract_date_time_phrases(
    text: str,
    locale: str,
    recognizer: Optional[DateRecognizer] = None,
    reference: Optional[datetime] = None,
    *,
    trigger_chars: Iterable[str] = (),
) -> List[DatePhrase]:
    """Run the recognizer for ``locale``; failures degrade to ``[]``.

    Phrases that sit inside a trigger-prefixed run (``#tomorrow``,
    ``@2024-06-01``) belong to the token phase and are dropped here.
    """

    if not text:
        return []
    code = get_language_config(locale).code
    active = recognizer or RuleDateRecognizer()
    try:
        phrases = active.recognize(text, code, reference or datetime.now())
    except Exception:
        logger.debug("Date recognizer %r failed for %r.", active, text, exc_info=True)
        return []
    return _valid_phrases(text, phrases, tuple(char for char in trigger_chars if char))


def _inside_token(text: str, start: int, trigger_chars: Tuple[str, ...]) -> bool:
    run_start = start
    while run_start > 0 and not text[run_start - 1].isspace():
        run_start -= 1
    prefix = text[run_start:start]
    return any(char in prefix for char in trigger_chars)


def _valid_phrases(text: str, phrases: List[DatePhrase], trigger_chars: Tuple[str, ...] = ()) -> List[DatePhrase]:
    valid: List[DatePhrase] = []
    for phrase in sorted(phrases or [], key=lambda item: item.start):
        if not (0 <= phrase.start < phrase.end <= len(text)):
            logger.debug("Dropping out-of-range date phrase %r.", phrase)
            continue
        if trigger_chars and _inside_token(text, phrase.start, trigger_chars):
            logger.debug("Leaving date phrase %r to the token phase.", phrase)
            continue
        if valid and phrase.start < valid[-1].end:
            continue
        valid.append(phrase)
    return valid


@dataclass
class DateAssignment:
    due: Optional[DatePhrase] = None
    scheduled: Optional[DatePhrase] = None
    remaining_text: str = ""

    def apply(self, setter: Callable[[str, Optional[date], Optional[time]], None]) -> None:
        for slot, phrase in (("due", self.due), ("scheduled", self.scheduled)):
            if phrase is not None:
                setter(slot, phrase.value.date(), phrase.value.time() if phrase.has_time else None)


@lru_cache(maxsize=None)
def _cue_patterns(code: str) -> Tuple["re.Pattern[str]", "re.Pattern[str]"]:
    lang = get_language_config(code)
    due = re.compile(rf"(?:^|(?<=\W))(?:{_alternation(lang.due_cues)})\s*[:]?\s*$", re.IGNORECASE)
    scheduled = re.compile(rf"(?:^|(?<=\W))(?:{_alternation(lang.scheduled_cues)})\s*[:]?\s*$", re.IGNORECASE)
    return due, scheduled


@lru_cache(maxsize=None)
def _range_patterns(code: str) -> Tuple["re.Pattern[str]", Optional["re.Pattern[str]"]]:
    lang = get_language_config(code)
    words = _alternation(lang.range_joiners)
    word_joiner = rf"\s+(?:{words})\s+|" if words else ""
    joiner = re.compile(rf"(?:{word_joiner}\s*[-–]\s*)", re.IGNORECASE)
    starts = _alternation(lang.range_starts)
    opener = re.compile(rf"(?:^|(?<=\W))(?:{starts})\s+$", re.IGNORECASE) if starts else None
    return joiner, opener


def _cue_for(text: str, phrase: DatePhrase, code: str) -> Tuple[Optional[str], int]:
    """Return ``(slot, cue_start)`` for the cue word right before ``phrase``."""
    due, scheduled = _cue_patterns(code)
    before = text[: phrase.start]
    due_match = due.search(before)
    scheduled_match = scheduled.search(before)
    if due_match and scheduled_match:
        # both end at the phrase, so the earlier-starting match is the longer cue
        if scheduled_match.start() < due_match.start():
            return "scheduled", scheduled_match.start()
        return "due", due_match.start()
    if due_match:
        return "due", due_match.start()
    if scheduled_match:
        return "scheduled", scheduled_match.start()
    return None, phrase.start


def _find_range(
    text: str, phrases: List[DatePhrase], code: str
) -> Optional[Tuple[int, DatePhrase, DatePhrase]]:
    """First adjacent pair joined by "to"/"-" whose end lies after its start."""
    joiner, opener = _range_patterns(code)
    for first, last in zip(phrases, phrases[1:]):
        if last.value <= first.value or not joiner.fullmatch(text[first.end:last.start]):
            continue
        found = opener.search(text[: first.start]) if opener is not None else None
        start = found.start() if found else _cue_for(text, first, code)[1]
        return start, first, last
    return None


def assign_date_slots(
    text: str,
    phrases: List[DatePhrase],
    locale: str,
    default_to_scheduled: bool = False,
) -> DateAssignment:
    """Pick due/scheduled phrases and strip every recognised phrase from ``text``.

    A range ("from tomorrow to friday", "May 20 - May 31") puts its start in
    scheduled and its end in due. Phrases preceded by a cue word then claim the
    slot their cue names, left to right. Uncued phrases fill the default slot
    if it is still empty. Phrases that fill no slot are removed too, together
    with their cue words, so the remaining text holds no further date.
    """
    assignment = DateAssignment(remaining_text=text)
    if not phrases:
        return assignment
    code = get_language_config(locale).code
    default = "scheduled" if default_to_scheduled else "due"
    ordered = sorted(phrases, key=lambda phrase: phrase.start)
    spans: List[Tuple[int, int]] = []

    found = _find_range(text, ordered, code)
    if found is not None:
        start, first, last = found
        assignment.scheduled, assignment.due = first, last
        spans.append((start, last.end))
        ordered = [phrase for phrase in ordered if phrase is not first and phrase is not last]

    cued: List[Tuple[str, DatePhrase]] = []
    uncued: List[DatePhrase] = []
    for phrase in ordered:
        slot, cue_start = _cue_for(text, phrase, code)
        spans.append((cue_start, phrase.end))
        if slot is None:
            uncued.append(phrase)
        else:
            cued.append((slot, phrase))

    for slot, phrase in cued:
        if getattr(assignment, slot) is None:
            setattr(assignment, slot, phrase)
        else:
            logger.debug("Dropping extra %s date phrase %r.", slot, phrase)
    for phrase in uncued:
        if getattr(assignment, default) is None:
            setattr(assignment, default, phrase)
        else:
            logger.debug("Dropping extra date phrase %r.", phrase)

    assignment.remaining_text = remove_spans(text, spans)
    return assignment


__all__ = [
    "DateRecognizer",
    "RuleDateRecognizer",
    "DateparserRecognizer",
    "DateAssignment",
    "extract_date_time_phrases",
    "assign_date_slots",
]
