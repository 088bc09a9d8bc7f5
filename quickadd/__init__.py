"""Natural-language quick-add parsing for task lines."""

from quickadd.pipeline import ParserConfig, TaskLineParser, parse_task_line
from quickadd.suggestions import SuggestionService
from quickadd.types import ExtractionResult, LexiconEntry, Suggestion, TriggerConfig

__all__ = [
    "ExtractionResult",
    "LexiconEntry",
    "ParserConfig",
    "Suggestion",
    "SuggestionService",
    "TaskLineParser",
    "TriggerConfig",
    "parse_task_line",
]
