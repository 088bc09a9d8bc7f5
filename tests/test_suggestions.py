from quickadd.suggestions import (
    SuggestionService,
    apply_selection,
    detect_active_trigger,
    extract_query_after_trigger,
    find_trigger_offset,
    has_trigger,
    is_valid_context,
    rank_suggestions,
)
from quickadd.types import LexiconEntry, Suggestion, TriggerConfig

STATUSES = [
    LexiconEntry("open", "Open"),
    LexiconEntry("active", "Active = Now", order=1),
    LexiconEntry("done", "Done", order=2),
]


def test_selection_round_trip():
    text = "Task *act"
    assert has_trigger(text, "*", len(text))
    query = extract_query_after_trigger(text, "*", len(text))
    (suggestion,) = rank_suggestions(query, STATUSES)
    result = apply_selection(text, "*", find_trigger_offset(text, "*", len(text)), suggestion)
    assert result.new_text == "Task Active = Now"
    assert result.new_cursor_offset == len("Task Active = Now")


def test_selection_keeps_text_after_the_query():
    suggestion = Suggestion("done", "Done", "Done")
    result = apply_selection("Task *do tomorrow", "*", 5, suggestion, insert="value")
    assert result.new_text == "Task done tomorrow"
    assert result.new_cursor_offset == 9


def test_whitespace_after_trigger_closes_it():
    assert not has_trigger("Task * act", "*", 10)
    assert find_trigger_offset("Task act", "*", 8) is None


def test_query_stops_at_whitespace_or_cursor():
    assert extract_query_after_trigger("Task *ac more", "*", 7) == "ac"
    assert extract_query_after_trigger("Task *act", "*", 7) == "a"
    assert extract_query_after_trigger("Task act", "*", 8) == ""


def test_rank_is_substring_on_value_or_label_in_order():
    assert [s.value for s in rank_suggestions("", STATUSES)] == ["open", "active", "done"]
    assert [s.value for s in rank_suggestions("now", STATUSES)] == ["active"]
    assert [s.value for s in rank_suggestions("O", STATUSES, limit=2)] == ["open", "active"]


def test_quotes_disable_suggestions_unless_escaped():
    assert is_valid_context('Say "hi', 7) is False
    assert is_valid_context('Say "hi" *', 10) is True
    assert is_valid_context('Say \\"hi *', 10) is True


def test_active_trigger_must_start_a_word():
    triggers = TriggerConfig.defaults()
    active = detect_active_trigger("Task *act", 9, triggers)
    assert (active.kind, active.offset, active.query) == ("status", 5, "act")
    assert detect_active_trigger("Email bob@example", 17, triggers) is None
    assert detect_active_trigger('Note "*act', 10, triggers) is None


def test_most_recent_trigger_wins():
    active = detect_active_trigger("Call #phone @of", 15, TriggerConfig.defaults())
    assert active.kind == "context"
    assert active.query == "of"


def test_service_suggests_and_applies_known_contexts():
    service = SuggestionService(STATUSES, known_tokens={"context": ["home", "office"]})
    suggestions = service.suggest("Call @of", 8)
    assert [s.value for s in suggestions] == ["office"]
    result = service.apply("Call @of", 8, suggestions[0])
    assert result.new_text == "Call @office"
    assert result.new_cursor_offset == 12


def test_service_respects_kind_filter_and_lookup():
    service = SuggestionService(STATUSES)
    assert service.suggest("Task *a", 7, kind="priority") == []
    assert service.find_suggestion("status", "done").label == "Done"
    assert service.find_suggestion("status", "missing") is None


def test_selection_at_mid_word_cursor_replaces_only_the_shown_query():
    text = "Task *acXY"
    query = extract_query_after_trigger(text, "*", 7)
    assert query == "a"
    suggestion = Suggestion("active", "Active = Now", "Active = Now")
    result = apply_selection(text, "*", 5, suggestion, cursor_offset=7)
    assert result.new_text == "Task Active = NowcXY"
    assert result.new_cursor_offset == len("Task Active = Now")


def test_selection_with_cursor_before_whitespace_matches_query():
    text = "Task *ac more"
    assert extract_query_after_trigger(text, "*", 6) == "ac"
    result = apply_selection(text, "*", 5, Suggestion("done", "Done", "Done"), cursor_offset=6)
    assert result.new_text == "Task Done more"


def test_service_apply_uses_the_cursor_query():
    service = SuggestionService(STATUSES)
    result = service.apply("Task *acXY", 7, Suggestion("active", "Active = Now", "Active = Now", kind="status"))
    assert result.new_text == "Task Active = NowcXY"
