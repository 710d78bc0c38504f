from __future__ import annotations

import enum
import logging
from typing import Callable

from .choices import parse_selection
from .grader import GradeResult, grade_selection, resolve_correct_index
from .models import Question, Quiz, Results
from .render import ANSWER_PROMPT, DONE, INVALID_ANSWER, format_feedback, format_question, format_results

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


class SessionState(enum.Enum):
    AWAITING_QUESTION = "awaiting_question"
    PRESENTING = "presenting"
    AWAITING_INPUT = "awaiting_input"
    SCORING = "scoring"
    DONE = "done"


class QuizSession:
    """Drives one pass over an already prepared quiz.

    Questions are taken in the order given; shuffling happens before the
    session is built. `read_line` is called with the prompt text and must
    return one line of user input (``input`` in production). `write` gets
    one block of output text per call (``print`` in production).
    """

    def __init__(self, quiz: Quiz, *, read_line: ReadLine = input, write: Write = print) -> None:
        self.quiz = quiz
        self.results = Results()
        self.state = SessionState.AWAITING_QUESTION
        self._read_line = read_line
        self._write = write
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self.quiz.questions) - self._position

    def ask_selection(self, question: Question) -> int:
        self.state = SessionState.AWAITING_INPUT
        while True:
            raw = self._read_line(ANSWER_PROMPT)
            selected = parse_selection(raw, len(question.answers))
            if selected is not None:
                return selected
            self._write(INVALID_ANSWER)

    def step(self) -> GradeResult | None:
        """Run a single question to completion; None once the quiz is exhausted."""
        if self.state is SessionState.DONE:
            return None
        if self._position >= len(self.quiz.questions):
            self._finish()
            return None

        question = self.quiz.questions[self._position]
        self.state = SessionState.PRESENTING
        self._write(format_question(question.prompt, question.answers))
        correct_index = resolve_correct_index(question.answers)

        selected = self.ask_selection(question)

        self.state = SessionState.SCORING
        grade = grade_selection(selected, correct_index)
        self.results.record(grade.is_correct)
        self._position += 1
        logger.debug(
            "Question scored (position=%s, verdict=%s, selected=%s, correct=%s)",
            self._position,
            grade.verdict,
            grade.selected_index + 1,
            grade.correct_index + 1,
        )
        self._write(format_feedback(grade))
        self._write(f"\n{format_results(self.results)}\n")
        self.state = SessionState.AWAITING_QUESTION
        return grade

    def _finish(self) -> None:
        self.state = SessionState.DONE
        logger.info("Quiz finished (%s)", format_results(self.results))
        self._write(f"Final score: {format_results(self.results)}")
        self._write(DONE)

    def run(self) -> Results:
        while self.state is not SessionState.DONE:
            self.step()
        return self.results
