from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from dotenv import find_dotenv, load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

def _env_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise RuntimeError(f"{name} must be one of: {', '.join(sorted(_TRUE | _FALSE))}")

def _env_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer") from None

@dataclass(frozen=True)
class Settings:
    seed: int | None = None
    shuffle_questions: bool = True
    shuffle_answers: bool = True
    log_level: str = "WARNING"

def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    log_level = (os.getenv("LOG_LEVEL") or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR, or CRITICAL")

    return Settings(
        seed=_env_int("QUIZ_SEED"),
        shuffle_questions=_env_bool("QUIZ_SHUFFLE_QUESTIONS", True),
        shuffle_answers=_env_bool("QUIZ_SHUFFLE_ANSWERS", True),
        log_level=log_level,
    )
