from __future__ import annotations


class QuizError(RuntimeError):
    """Base for failures reported to the user before a session starts."""


class LoadError(QuizError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Error reading quiz file: {detail}")
        self.detail = detail


class ParseError(QuizError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Parse Error: {detail}")
        self.detail = detail


class MalformedQuestion(QuizError):
    def __init__(self, position: int, reason: str) -> None:
        super().__init__(f"Malformed question #{position}: {reason}")
        self.position = position
        self.reason = reason


class CorrectAnswerMissing(RuntimeError):
    """Internal invariant violation: a question reached scoring without exactly one correct answer.

    Not a QuizError on purpose, the CLI must not present it as a bad input file.
    """
