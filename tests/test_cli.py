from datetime import date, time

from quickadd.lexicon_config import LexiconConfig
from quickadd.types import ExtractionResult, LexiconEntry
from quickadd_app import main as cli


def test_format_preview_lists_present_fields():
    result = ExtractionResult(
        title="Call",
        status="open",
        due_date=date(2024, 5, 16),
        due_time=time(15, 0),
        contexts=["phone", "home"],
    )
    preview = cli.format_preview(result)
    assert "Title  " in preview
    assert "Due      : 2024-05-16 15:00" in preview
    assert "Contexts : phone, home" in preview
    assert "Priority" not in preview


def test_build_parser_reads_environment(monkeypatch):
    monkeypatch.setenv("QUICKADD_LOCALE", "de")
    monkeypatch.setenv("QUICKADD_DEFAULT_TO_SCHEDULED", "true")
    parser = cli.build_parser(LexiconConfig(statuses=(LexiconEntry("open", "Offen"),)))
    assert parser.language.code == "de"
    assert parser.config.default_to_scheduled is True
    assert parser.parse("Steuer Offen").status == "open"


def test_one_shot_line(monkeypatch, tmp_path, capsys):
    monkeypatch.delenv("QUICKADD_LOCALE", raising=False)
    config_path = tmp_path / "lexicons.yml"
    config_path.write_text("statuses:\n  - value: done\n    label: Done\n", encoding="utf-8")

    exit_code = cli.main(["--line", "Wrap up Done @office 30 min", "--config", str(config_path)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Wrap up" in out
    assert "Status   : done" in out
    assert "Estimate : 30 min" in out


def test_interactive_loop_stops_on_quit(monkeypatch, tmp_path, capsys):
    monkeypatch.delenv("QUICKADD_LOCALE", raising=False)
    answers = iter(["Buy milk #errands", "quit"])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(answers))

    assert cli.main(["--config", str(tmp_path / "missing.yml")]) == 0

    out = capsys.readouterr().out
    assert "Tags  : errands" in out
    assert "Goodbye!" in out
