"""FastAPI application exposing task-line parsing and suggestions."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from quickadd.pipeline import TaskLineParser
from quickadd.suggestions import SuggestionService
from quickadd.types import PROPERTY_KINDS
from quickadd_app.main import build_parser, build_suggestion_service, load_lexicons

logger = logging.getLogger(__name__)


class ParseRequest(BaseModel):
    text: str


class SuggestRequest(BaseModel):
    text: str
    cursor: Optional[int] = Field(default=None, ge=0)
    kind: Optional[str] = None


class ApplyRequest(BaseModel):
    text: str
    cursor: Optional[int] = Field(default=None, ge=0)
    kind: str
    value: str


def _cursor(text: str, cursor: Optional[int]) -> int:
    return len(text) if cursor is None else min(cursor, len(text))


def create_app(
    parser: Optional[TaskLineParser] = None,
    suggestion_service: Optional[SuggestionService] = None,
) -> FastAPI:
    """WHAT: instantiate FastAPI around one parser and one suggestion service.

    WHY: editors call ``/api/suggest`` on every keystroke and ``/api/parse``
    on submit, and both must see the same lexicons and triggers as the CLI.
    HOW: accept dependency overrides (tests), otherwise load the lexicon file
    once and share it between both services via ``app.state``.
    """
    if parser is None or suggestion_service is None:
        lexicons = load_lexicons()
        parser = parser or build_parser(lexicons)
        suggestion_service = suggestion_service or build_suggestion_service(lexicons)

    app = FastAPI(title="Quick-add API", version="1.0.0")
    app.state.parser = parser
    app.state.suggestions = suggestion_service

    @app.get("/api/health")
    def health_check() -> Dict[str, Any]:
        return {
            "status": "ok",
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
            "locale": app.state.parser.language.code,
        }

    @app.post("/api/parse")
    def parse_line(payload: ParseRequest) -> Dict[str, Any]:
        result = app.state.parser.parse(payload.text)
        logger.debug("Parsed %r -> %s", payload.text, result)
        return result.to_dict()

    @app.post("/api/suggest")
    def suggest(payload: SuggestRequest) -> Dict[str, Any]:
        """WHAT: list completions for the trigger the cursor is currently in.

        WHY: the picker only opens after a trigger character, and it must close
        again inside quotes or after whitespace.
        HOW: detect the active trigger, then rank that kind's lexicon against
        the typed query. No active trigger yields an empty list.
        """
        if payload.kind is not None and payload.kind not in PROPERTY_KINDS:
            raise HTTPException(status_code=400, detail=f"Unknown property kind: {payload.kind}")
        service: SuggestionService = app.state.suggestions
        cursor = _cursor(payload.text, payload.cursor)
        active = service.active_trigger(payload.text, cursor)
        if active is None or (payload.kind is not None and active.kind != payload.kind):
            return {"kind": payload.kind, "query": "", "trigger_offset": None, "suggestions": []}
        suggestions = service.suggest(payload.text, cursor)
        return {
            "kind": active.kind,
            "query": active.query,
            "trigger_offset": active.offset,
            "suggestions": [
                {"value": item.value, "label": item.label, "display": item.display} for item in suggestions
            ],
        }

    @app.post("/api/apply")
    def apply(payload: ApplyRequest) -> Dict[str, Any]:
        service: SuggestionService = app.state.suggestions
        suggestion = service.find_suggestion(payload.kind, payload.value)
        if suggestion is None:
            raise HTTPException(status_code=404, detail=f"No {payload.kind} option named {payload.value!r}.")
        cursor = _cursor(payload.text, payload.cursor)
        active = service.active_trigger(payload.text, cursor)
        if active is None or active.kind != payload.kind:
            raise HTTPException(status_code=400, detail="No active trigger at the cursor for this kind.")
        selection = service.apply(payload.text, cursor, suggestion)
        return {"new_text": selection.new_text, "new_cursor_offset": selection.new_cursor_offset}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    from quickadd_app.config import get_web_host, get_web_port

    uvicorn.run(
        "quickadd_app.web_api:app",
        host=get_web_host(),
        port=get_web_port(),
        reload=False,
    )
