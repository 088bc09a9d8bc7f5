from quickadd.locales import get_language_config
from quickadd.recurrence import extract_recurrence

EN = get_language_config("en")


def _rule(text: str, locale: str = "en"):
    found = extract_recurrence(text, get_language_config(locale))
    return found[0] if found else None


def test_simple_frequencies():
    assert _rule("Water plants daily") == "FREQ=DAILY"
    assert _rule("Review budget every month") == "FREQ=MONTHLY"
    assert _rule("Renew insurance annually") == "FREQ=YEARLY"


def test_interval_and_every_other():
    assert _rule("Backup every 2 weeks") == "FREQ=WEEKLY;INTERVAL=2"
    assert _rule("Mow lawn every other week") == "FREQ=WEEKLY;INTERVAL=2"
    assert _rule("Stretch every 3 days") == "FREQ=DAILY;INTERVAL=3"


def test_weekday_rules():
    assert _rule("Team sync every monday") == "FREQ=WEEKLY;BYDAY=MO"
    assert _rule("Yoga on Thursdays") == "FREQ=WEEKLY;BYDAY=TH"


def test_ordinal_weekday_becomes_monthly_rule():
    assert _rule("Pay rent every last friday") == "FREQ=MONTHLY;BYDAY=FR;BYSETPOS=-1"
    assert _rule("Book club every first Tuesday") == "FREQ=MONTHLY;BYDAY=TU;BYSETPOS=1"


def test_span_covers_the_matched_phrase():
    rule, span = extract_recurrence("Stand-up every 2 days at noon", EN)
    assert rule == "FREQ=DAILY;INTERVAL=2"
    assert span.matched_source == "every 2 days"
    assert (span.start, span.end) == (9, 21)


def test_other_locales():
    assert _rule("Müll rausbringen jeden montag", "de") == "FREQ=WEEKLY;BYDAY=MO"
    assert _rule("Blumen gießen wöchentlich", "de") == "FREQ=WEEKLY"
    assert _rule("Tøm postkassen hver dag", "da") == "FREQ=DAILY"


def test_no_recurrence():
    assert extract_recurrence("Buy milk", EN) is None
    assert extract_recurrence("", EN) is None
