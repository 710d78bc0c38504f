from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import LoadError, ParseError

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise LoadError(str(exc)) from exc
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"not UTF-8 text: {exc}") from exc


def parse_records(raw: str) -> list[dict[str, Any]]:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseError(str(exc)) from exc
    except RecursionError as exc:
        raise ParseError(f"document nested too deeply: {exc}") from exc
    if not isinstance(payload, dict):
        raise ParseError("expected a JSON object with a 'questions' list")
    questions = payload.get("questions")
    if not isinstance(questions, list):
        raise ParseError("'questions' must be a list")
    for idx, record in enumerate(questions, start=1):
        if not isinstance(record, dict):
            raise ParseError(f"question #{idx} is not an object")
    return questions


def load_records(path: str | Path) -> list[dict[str, Any]]:
    path = Path(path)
    records = parse_records(_read_text(path))
    logger.info("Quiz source loaded (path=%s, questions=%s)", path, len(records))
    return records
