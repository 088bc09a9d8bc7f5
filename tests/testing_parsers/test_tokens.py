from quickadd.tokens import extract_tokens


def test_tokens_keep_case_and_dedupe_case_insensitively():
    tokens, rest = extract_tokens("Plan @Home trip @home @office", "@")
    assert tokens == ["Home", "office"]
    assert rest == "Plan trip"


def test_wiki_link_tokens_may_contain_spaces():
    tokens, rest = extract_tokens("Draft outline +[[Garden Plan]] +chores", "+")
    assert tokens == ["[[Garden Plan]]", "chores"]
    assert rest == "Draft outline"


def test_trigger_followed_by_space_is_not_a_token():
    tokens, rest = extract_tokens("Rank # 1 item", "#")
    assert tokens == []
    assert rest == "Rank # 1 item"


def test_missing_or_blank_trigger_skips_extraction():
    assert extract_tokens("Call @mom", None) == ([], "Call @mom")
    assert extract_tokens("Call @mom", " ") == ([], "Call @mom")
