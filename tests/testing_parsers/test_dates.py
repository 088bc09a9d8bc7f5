from datetime import date, datetime, time

import quickadd.dates as dates
from quickadd.dates import (
    DateparserRecognizer,
    RuleDateRecognizer,
    assign_date_slots,
    extract_date_time_phrases,
)
from quickadd.types import DatePhrase

REFERENCE = datetime(2024, 5, 15, 9, 30)  # a Wednesday


def _recognize(text: str, locale: str = "en"):
    return RuleDateRecognizer().recognize(text, locale, REFERENCE)


def test_relative_day_word():
    phrases = _recognize("Call tomorrow")
    assert len(phrases) == 1
    assert phrases[0].text == "tomorrow"
    assert phrases[0].value.date() == date(2024, 5, 16)
    assert phrases[0].has_time is False


def test_now_carries_the_reference_time():
    (phrase,) = _recognize("Ship it now")
    assert phrase.value == datetime(2024, 5, 15, 9, 30)
    assert phrase.has_time is True


def test_weekday_today_and_next_week():
    assert _recognize("wednesday")[0].value.date() == date(2024, 5, 15)
    assert _recognize("next wednesday")[0].value.date() == date(2024, 5, 22)
    assert _recognize("friday")[0].value.date() == date(2024, 5, 17)


def test_in_days_and_weeks():
    assert _recognize("in 3 days")[0].value.date() == date(2024, 5, 18)
    assert _recognize("in 2 weeks")[0].value.date() == date(2024, 5, 29)


def test_month_names_roll_forward_when_yearless():
    assert _recognize("June 3")[0].value.date() == date(2024, 6, 3)
    assert _recognize("3rd of June")[0].value.date() == date(2024, 6, 3)
    assert _recognize("March 1")[0].value.date() == date(2025, 3, 1)
    assert _recognize("March 1, 2026")[0].value.date() == date(2026, 3, 1)


def test_numeric_dates_follow_locale_order():
    assert _recognize("12/25")[0].value.date() == date(2024, 12, 25)
    assert _recognize("2024-07-04")[0].value.date() == date(2024, 7, 4)
    assert _recognize("25.12.2024", "de")[0].value.date() == date(2024, 12, 25)


def test_time_attaches_to_adjacent_date():
    (phrase,) = _recognize("Dinner friday at 7:15pm with Sam")
    assert phrase.text == "friday at 7:15pm"
    assert phrase.value == datetime(2024, 5, 17, 19, 15)
    assert phrase.has_time is True


def test_lone_time_lands_on_reference_day():
    (phrase,) = _recognize("Call back at 4pm")
    assert phrase.value == datetime(2024, 5, 15, 16, 0)


def test_weekday_after_every_is_left_for_recurrence():
    assert _recognize("Gym every monday") == []


def test_unknown_locale_uses_english_tables():
    phrases = extract_date_time_phrases("Call tomorrow", "xx", reference=REFERENCE)
    assert [phrase.text for phrase in phrases] == ["tomorrow"]


class _Boom:
    def recognize(self, text, locale, reference):
        raise ValueError("nope")


def test_recognizer_failure_yields_no_phrases():
    assert extract_date_time_phrases("Call tomorrow", "en", _Boom(), REFERENCE) == []


class _OutOfRange:
    def recognize(self, text, locale, reference):
        return [DatePhrase(40, 50, "later", REFERENCE)]


def test_out_of_range_phrases_are_dropped():
    assert extract_date_time_phrases("short", "en", _OutOfRange(), REFERENCE) == []


def test_dateparser_adapter_locates_phrases(monkeypatch):
    captured = {}

    def fake_search_dates(text, languages=None, settings=None):
        captured["languages"] = languages
        captured["settings"] = settings
        return [("mañana a las 5:00", datetime(2024, 5, 16, 5, 0))]

    monkeypatch.setattr(dates, "search_dates", fake_search_dates)

    text = "Llamar a Ana mañana a las 5:00"
    (phrase,) = DateparserRecognizer().recognize(text, "es", REFERENCE)

    assert captured["languages"] == ["es"]
    assert captured["settings"]["RELATIVE_BASE"] == REFERENCE
    assert text[phrase.start:phrase.end] == "mañana a las 5:00"
    assert phrase.has_time is True


def test_dateparser_adapter_handles_no_results(monkeypatch):
    monkeypatch.setattr(dates, "search_dates", lambda *args, **kwargs: None)
    assert DateparserRecognizer().recognize("nothing here", "en", REFERENCE) == []


def _phrase(text: str, fragment: str, value: datetime, has_time: bool = False) -> DatePhrase:
    start = text.index(fragment)
    return DatePhrase(start, start + len(fragment), fragment, value, has_time)


def test_assign_without_cues_fills_only_the_default_slot():
    text = "Trip 2024-06-01 2024-06-10"
    phrases = [
        _phrase(text, "2024-06-01", datetime(2024, 6, 1)),
        _phrase(text, "2024-06-10", datetime(2024, 6, 10)),
    ]
    assignment = assign_date_slots(text, phrases, "en")
    assert assignment.due is phrases[0]
    assert assignment.scheduled is None
    assert assignment.remaining_text == "Trip"


def test_assign_cued_phrases_fill_both_slots():
    text = "Report start on May 20 deadline May 31"
    phrases = [
        _phrase(text, "May 20", datetime(2024, 5, 20)),
        _phrase(text, "May 31", datetime(2024, 5, 31)),
    ]
    assignment = assign_date_slots(text, phrases, "en")
    assert assignment.scheduled is phrases[0]
    assert assignment.due is phrases[1]
    assert assignment.remaining_text == "Report"


def test_assignment_applies_floating_dates_without_time():
    text = "Pay rent tomorrow"
    assignment = assign_date_slots(text, [_phrase(text, "tomorrow", datetime(2024, 5, 16))], "en")
    seen = {}
    assignment.apply(lambda slot, day, clock: seen.update({slot: (day, clock)}))
    assert seen == {"due": (date(2024, 5, 16), None)}


def test_assignment_keeps_time_when_present():
    text = "Call at 10:00"
    assignment = assign_date_slots(
        text, [_phrase(text, "at 10:00", datetime(2024, 5, 15, 10, 0), has_time=True)], "en"
    )
    seen = {}
    assignment.apply(lambda slot, day, clock: seen.update({slot: (day, clock)}))
    assert seen == {"due": (date(2024, 5, 15), time(10, 0))}


def test_uncued_first_phrase_takes_default_slot_and_cued_second_fills_other():
    text = "Prep tomorrow scheduled for friday"
    phrases = [
        _phrase(text, "tomorrow", datetime(2024, 5, 16)),
        _phrase(text, "friday", datetime(2024, 5, 17)),
    ]
    assignment = assign_date_slots(text, phrases, "en")
    assert assignment.due is phrases[0]
    assert assignment.scheduled is phrases[1]
    assert assignment.remaining_text == "Prep"


def test_cued_phrase_claims_its_slot_before_an_uncued_one():
    text = "Prep tomorrow due friday"
    phrases = [
        _phrase(text, "tomorrow", datetime(2024, 5, 16)),
        _phrase(text, "friday", datetime(2024, 5, 17)),
    ]
    assignment = assign_date_slots(text, phrases, "en")
    assert assignment.due is phrases[1]
    assert assignment.scheduled is None
    assert assignment.remaining_text == "Prep"


def test_range_fills_scheduled_then_due():
    text = "Conference from tomorrow to friday"
    phrases = [
        _phrase(text, "tomorrow", datetime(2024, 5, 16)),
        _phrase(text, "friday", datetime(2024, 5, 17)),
    ]
    assignment = assign_date_slots(text, phrases, "en")
    assert assignment.scheduled is phrases[0]
    assert assignment.due is phrases[1]
    assert assignment.remaining_text == "Conference"


def test_dash_range_between_iso_dates():
    text = "Sprint 2024-06-03 - 2024-06-14"
    phrases = extract_date_time_phrases(text, "en", reference=REFERENCE)
    assignment = assign_date_slots(text, phrases, "en")
    assert assignment.scheduled.value.date() == date(2024, 6, 3)
    assert assignment.due.value.date() == date(2024, 6, 14)
    assert assignment.remaining_text == "Sprint"


def test_backwards_pair_is_not_a_range():
    text = "Call friday to tomorrow"
    phrases = [
        _phrase(text, "friday", datetime(2024, 5, 17)),
        _phrase(text, "tomorrow", datetime(2024, 5, 16)),
    ]
    assignment = assign_date_slots(text, phrases, "en")
    assert assignment.due is phrases[0]
    assert assignment.scheduled is None


def test_decimals_and_versions_are_not_dates():
    assert _recognize("Buy 2.5 kg of rice") == []
    assert _recognize("Ship release 1.2 notes") == []
    assert _recognize("Ship release 1.2 notes", "de") == []


def test_dotted_dates_need_a_day_first_locale():
    assert _recognize("Party 24.12", "de")[0].value.date() == date(2024, 12, 24)
    assert _recognize("Party 24.12") == []


def test_phrase_inside_trigger_token_is_skipped():
    text = "Plan #tomorrow review"
    assert extract_date_time_phrases(text, "en", reference=REFERENCE, trigger_chars=["#"]) == []
    assert [p.text for p in extract_date_time_phrases(text, "en", reference=REFERENCE)] == ["tomorrow"]


def test_month_names_with_locale_joiners():
    assert _recognize("el 20 de mayo", "es")[0].value.date() == date(2024, 5, 20)
    assert _recognize("1er mars", "fr")[0].value.date() == date(2025, 3, 1)
    assert _recognize("3 juni", "sv")[0].value.date() == date(2024, 6, 3)
