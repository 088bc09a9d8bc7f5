from pathlib import Path

import pytest

from quickadd.lexicon_config import load_lexicon_config


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "lexicons.yml"
    path.write_text(body, encoding="utf-8")
    return path


def test_loads_entries_triggers_and_locale(tmp_path):
    path = _write(
        tmp_path,
        """
locale: de
statuses:
  - value: active
    label: Active = Now
  - done
priorities:
  - {value: high, label: Hoch, order: 5}
triggers:
  status: "*"
  priority: {character: "!", enabled: true}
known:
  contexts: [home, office]
""",
    )
    config = load_lexicon_config(path)
    assert config.locale == "de"
    assert [entry.value for entry in config.statuses] == ["active", "done"]
    assert config.statuses[0].label == "Active = Now"
    assert config.statuses[1].order == 1
    assert config.priorities[0].order == 5
    assert config.triggers.character_for("priority") == "!"
    assert config.known_tokens["context"] == ("home", "office")


def test_malformed_entries_are_skipped(tmp_path):
    path = _write(tmp_path, "statuses:\n  - label: No value\n  - 42\n  - value: open\n")
    config = load_lexicon_config(path)
    assert [entry.value for entry in config.statuses] == ["open"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_lexicon_config(tmp_path / "absent.yml")


def test_non_mapping_document_raises(tmp_path):
    with pytest.raises(ValueError):
        load_lexicon_config(_write(tmp_path, "- just\n- a list\n"))


def test_statuses_must_be_a_list(tmp_path):
    with pytest.raises(ValueError):
        load_lexicon_config(_write(tmp_path, "statuses: open\n"))


def test_bundled_config_is_valid():
    config = load_lexicon_config(Path(__file__).resolve().parents[1] / "config" / "lexicons.yml")
    assert [entry.value for entry in config.statuses] == ["open", "in-progress", "done"]
    assert config.triggers.character_for("priority") is None
