from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from .errors import MalformedQuestion
from .loader import load_records
from .validation import validate_question_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Answer:
    text: str
    is_correct: bool


@dataclass(frozen=True)
class Question:
    prompt: str
    answers: tuple[Answer, ...]


@dataclass(frozen=True)
class Quiz:
    questions: tuple[Question, ...]

    def __len__(self) -> int:
        return len(self.questions)


@dataclass
class Results:
    correct: int = 0
    incorrect: int = 0

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    def record(self, is_correct: bool) -> None:
        if is_correct:
            self.correct += 1
        else:
            self.incorrect += 1


def build_question(record: dict[str, Any], position: int) -> Question:
    """Normalise one raw record, tagging each option correct/incorrect.

    `answer` is a 1-based position in the untouched `options` order. The tag
    is fixed here, before any shuffling happens.
    """
    issues = validate_question_record(record, position)
    for issue in issues:
        if issue.severity == "error":
            raise MalformedQuestion(position, issue.message)
    for issue in issues:
        logger.warning("Question #%s: %s", position, issue.message)

    correct_position = record["answer"]
    answers = tuple(
        Answer(text=str(option), is_correct=(idx == correct_position))
        for idx, option in enumerate(record["options"], start=1)
    )
    return Question(prompt=str(record["question"]).strip(), answers=answers)


def build_quiz(records: Iterable[dict[str, Any]]) -> Quiz:
    return Quiz(
        questions=tuple(
            build_question(record, position)
            for position, record in enumerate(records, start=1)
        )
    )


def load_quiz(path: str | Path) -> Quiz:
    return build_quiz(load_records(path))
