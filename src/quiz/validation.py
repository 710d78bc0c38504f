from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .normalize import norm_text


@dataclass(frozen=True)
class ValidationIssue:
    severity: str  # "error" | "warning"
    message: str
    position: int | None = None

    def describe(self) -> str:
        if self.position is None:
            return self.message
        return f"question #{self.position}: {self.message}"


def _is_int(value: Any) -> bool:
    # JSON true/false decode to bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def validate_question_record(record: Any, position: int | None = None) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if not isinstance(record, dict):
        return [ValidationIssue("error", "record must be an object", position)]

    prompt = record.get("question")
    if not isinstance(prompt, str) or not norm_text(prompt):
        issues.append(ValidationIssue("error", "missing question text", position))

    options = record.get("options")
    if not isinstance(options, list) or not options:
        issues.append(ValidationIssue("error", "options must be a non-empty list", position))
        options = None
    else:
        for idx, opt in enumerate(options, start=1):
            if not isinstance(opt, str):
                issues.append(ValidationIssue("error", f"option {idx} must be text", position))
            elif not norm_text(opt):
                issues.append(ValidationIssue("error", f"option {idx} is blank", position))

    answer = record.get("answer")
    if answer is None:
        issues.append(ValidationIssue("error", "missing correct answer", position))
    elif not _is_int(answer):
        issues.append(ValidationIssue("error", "correct answer must be an integer position", position))
    elif options is not None and not 1 <= answer <= len(options):
        issues.append(
            ValidationIssue(
                "error",
                f"correct answer {answer} out of range 1..{len(options)}",
                position,
            )
        )
    elif options is None and answer < 1:
        issues.append(ValidationIssue("error", f"correct answer {answer} out of range", position))

    if options is not None:
        texts = [norm_text(opt) for opt in options if isinstance(opt, str)]
        if len(set(texts)) < len(texts):
            issues.append(ValidationIssue("warning", "duplicate option text", position))
    return issues


def validate_records(records: Iterable[Any]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for position, record in enumerate(records, start=1):
        issues.extend(validate_question_record(record, position))
    return issues
