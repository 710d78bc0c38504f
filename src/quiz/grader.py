from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import CorrectAnswerMissing
from .models import Answer


@dataclass(frozen=True)
class GradeResult:
    verdict: str  # correct | wrong
    selected_index: int
    correct_index: int

    @property
    def is_correct(self) -> bool:
        return self.verdict == "correct"


def resolve_correct_index(answers: Sequence[Answer]) -> int:
    positions = [idx for idx, answer in enumerate(answers) if answer.is_correct]
    if not positions:
        raise CorrectAnswerMissing("Correct answer not found")
    if len(positions) > 1:
        raise CorrectAnswerMissing(f"Multiple answers tagged correct at {positions}")
    return positions[0]


def grade_selection(selected_index: int, correct_index: int) -> GradeResult:
    verdict = "correct" if selected_index == correct_index else "wrong"
    return GradeResult(verdict, selected_index, correct_index)
