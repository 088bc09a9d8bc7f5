"""Assemble the task-line parser and run the interactive CLI loop."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from quickadd.dates import DateparserRecognizer, DateRecognizer, RuleDateRecognizer
from quickadd.lexicon_config import LexiconConfig, load_lexicon_config
from quickadd.pipeline import TaskLineParser
from quickadd.suggestions import SuggestionService
from quickadd.types import ExtractionResult
from quickadd_app.config import (
    get_date_backend,
    get_lexicon_config_path,
    get_locale,
    get_log_level,
    get_suggestion_limit,
    is_default_to_scheduled,
)

logger = logging.getLogger(__name__)


# -- Parser construction -------------------------------------------------------
def load_lexicons(path: Optional[Path] = None) -> LexiconConfig:
    """Read the lexicon file, or fall back to built-in keywords when it is absent.

    A missing file only logs a warning; a malformed one still raises.
    """
    target = path or get_lexicon_config_path()
    try:
        return load_lexicon_config(target)
    except FileNotFoundError:
        logger.warning("Lexicon config %s not found; using built-in keywords.", target)
        return LexiconConfig()


def build_date_recognizer(backend: Optional[str] = None) -> DateRecognizer:
    if (backend or get_date_backend()) == "dateparser":
        return DateparserRecognizer()
    return RuleDateRecognizer()


def build_parser(lexicons: Optional[LexiconConfig] = None, *, locale: Optional[str] = None) -> TaskLineParser:
    """Wire environment settings and lexicons into a :class:`TaskLineParser`.

    WHAT: resolve locale, default date slot and date backend, then build the
    parser from the configured statuses, priorities and triggers.
    WHY: the CLI and the web API must parse identically for the same
    environment.
    HOW: ``QUICKADD_LOCALE`` wins over the file's ``locale`` key; explicit
    arguments win over both.
    """
    config = lexicons or load_lexicons()
    return TaskLineParser(
        config.statuses,
        config.priorities,
        config.triggers,
        locale or get_locale(default=config.locale),
        default_to_scheduled=is_default_to_scheduled(),
        date_recognizer=build_date_recognizer(),
    )


def build_suggestion_service(lexicons: Optional[LexiconConfig] = None) -> SuggestionService:
    config = lexicons or load_lexicons()
    return SuggestionService(
        config.statuses,
        config.priorities,
        config.triggers,
        known_tokens=config.known_tokens,
        limit=get_suggestion_limit(),
    )


# -- Output formatting ---------------------------------------------------------
def format_preview(result: ExtractionResult) -> str:
    """Render the parsed fields as aligned ``label: value`` lines."""

    rows: List[tuple] = [("Title", result.title or "(empty)")]
    if result.status:
        rows.append(("Status", result.status))
    if result.priority:
        rows.append(("Priority", result.priority))
    for slot in ("due", "scheduled"):
        day = getattr(result, f"{slot}_date")
        if day is None:
            continue
        clock = getattr(result, f"{slot}_time")
        value = day.isoformat() + (f" {clock.strftime('%H:%M')}" if clock else "")
        rows.append((slot.capitalize(), value))
    if result.estimate_minutes:
        rows.append(("Estimate", f"{result.estimate_minutes} min"))
    if result.recurrence_rule:
        rows.append(("Recurrence", result.recurrence_rule))
    for label, values in (("Contexts", result.contexts), ("Tags", result.tags), ("Projects", result.projects)):
        if values:
            rows.append((label, ", ".join(values)))
    if result.details:
        rows.append(("Details", result.details))

    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label.ljust(width)} : {value}" for label, value in rows)


# -- Interactive CLI loop ------------------------------------------------------
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse natural-language task lines.")
    parser.add_argument("--line", help="Parse a single line and exit.")
    parser.add_argument("--config", type=Path, default=None, help="Path to lexicons.yml.")
    parser.add_argument("--locale", default=None, help="Locale code (en, de, da).")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Minimal CLI driver that previews how each typed line is parsed.

    WHAT: read task lines from stdin (or ``--line``) and print the extracted
    fields.
    WHY: gives a quick way to check lexicon and locale settings before wiring
    them into an editor.
    HOW: reuse ``build_parser`` (same wiring the web API uses) and exit on
    EOF/KeyboardInterrupt or "quit" commands.
    """
    args = _build_arg_parser().parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    parser = build_parser(load_lexicons(args.config), locale=args.locale)
    if args.line is not None:
        print(format_preview(parser.parse(args.line)))
        return 0

    print("Quick-add ready. Type 'quit' or 'exit' to stop.")
    while True:
        try:
            line = input("Task: ")
        except (EOFError, KeyboardInterrupt):
            print("\nExiting.")
            break

        if line.strip().lower() in {"quit", "exit"}:
            print("Goodbye!")
            break

        print()
        print(format_preview(parser.parse(line)))
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
