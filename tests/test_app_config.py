import logging
from pathlib import Path

from quickadd_app import config


def test_defaults_when_env_is_empty():
    env = {}
    assert config.get_locale(env) == "en"
    assert config.get_lexicon_config_path(env) == Path("config/lexicons.yml")
    assert config.is_default_to_scheduled(env) is False
    assert config.get_date_backend(env) == "rules"
    assert config.get_suggestion_limit(env) == 10
    assert config.get_log_level(env) == logging.WARNING
    assert config.get_web_port(env) == 9000


def test_overrides_are_parsed():
    env = {
        "QUICKADD_LOCALE": "da",
        "QUICKADD_LEXICON_CONFIG": "/tmp/lex.yml",
        "QUICKADD_DEFAULT_TO_SCHEDULED": "yes",
        "QUICKADD_DATE_BACKEND": "Dateparser",
        "QUICKADD_SUGGESTION_LIMIT": "5",
        "QUICKADD_LOG_LEVEL": "debug",
        "QUICKADD_WEB_PORT": "8123",
    }
    assert config.get_locale(env) == "da"
    assert config.get_lexicon_config_path(env) == Path("/tmp/lex.yml")
    assert config.is_default_to_scheduled(env) is True
    assert config.get_date_backend(env) == "dateparser"
    assert config.get_suggestion_limit(env) == 5
    assert config.get_log_level(env) == logging.DEBUG
    assert config.get_web_port(env) == 8123


def test_invalid_values_fall_back():
    env = {
        "QUICKADD_DEFAULT_TO_SCHEDULED": "maybe",
        "QUICKADD_DATE_BACKEND": "magic",
        "QUICKADD_SUGGESTION_LIMIT": "-3",
        "QUICKADD_LOG_LEVEL": "loud",
        "QUICKADD_WEB_PORT": "99999",
    }
    assert config.is_default_to_scheduled(env) is False
    assert config.get_date_backend(env) == "rules"
    assert config.get_suggestion_limit(env) == 10
    assert config.get_log_level(env) == logging.WARNING
    assert config.get_web_port(env) == 9000


def test_locale_default_can_come_from_the_lexicon_file():
    assert config.get_locale({}, default="de") == "de"
    assert config.get_locale({"QUICKADD_LOCALE": "da"}, default="de") == "da"
