from __future__ import annotations

import random
from dataclasses import replace

from .models import Question, Quiz


def make_rng(seed: int | None = None) -> random.Random:
    if seed is None:
        return random.Random()
    return random.Random(seed)


def shuffle_answers(question: Question, rng: random.Random) -> Question:
    answers = list(question.answers)
    rng.shuffle(answers)
    return replace(question, answers=tuple(answers))


def shuffle_questions(quiz: Quiz, rng: random.Random) -> Quiz:
    questions = list(quiz.questions)
    rng.shuffle(questions)
    return replace(quiz, questions=tuple(questions))


def prepare_quiz(
    quiz: Quiz,
    rng: random.Random,
    *,
    shuffle_question_order: bool = True,
    shuffle_answer_order: bool = True,
) -> Quiz:
    if shuffle_question_order:
        quiz = shuffle_questions(quiz, rng)
    if shuffle_answer_order:
        quiz = replace(
            quiz,
            questions=tuple(shuffle_answers(q, rng) for q in quiz.questions),
        )
    return quiz
