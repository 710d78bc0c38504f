from __future__ import annotations

from typing import Sequence

from .grader import GradeResult
from .models import Answer, Results

SEPARATOR = "---"
ANSWER_PROMPT = "Answer: "
INVALID_ANSWER = "Invalid answer"
CORRECT = "Correct!"
DONE = "Done!"


def format_question(prompt: str, answers: Sequence[Answer]) -> str:
    parts = [SEPARATOR, "", prompt, ""]
    for idx, answer in enumerate(answers, start=1):
        parts.append(f"{idx} - {answer.text}")
    return "\n".join(parts)


def format_feedback(grade: GradeResult) -> str:
    if grade.is_correct:
        return CORRECT
    return f"Incorrect! Correct answer was #{grade.correct_index + 1}"


def percent_correct(results: Results) -> int:
    total = results.total
    if total == 0:
        return 0
    return 100 * results.correct // total


def format_results(results: Results) -> str:
    return f"{percent_correct(results)}% correct ({results.correct} of {results.total})"
