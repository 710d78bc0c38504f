from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from .config import Settings, load_settings
from .errors import QuizError
from .loader import load_records
from .models import load_quiz
from .randomizer import make_rng, prepare_quiz
from .session import QuizSession, ReadLine, Write
from .validation import validate_records

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz-runner",
        description="Run a multiple-choice quiz in the terminal.",
    )
    parser.add_argument("source", help="path to the quiz JSON file")
    parser.add_argument("--seed", type=int, help="seed the shuffler for a reproducible order")
    parser.add_argument(
        "--no-shuffle",
        action="store_true",
        default=False,
        help="keep questions and answers in file order",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        default=False,
        help="validate the quiz file and exit without running it",
    )
    return parser


def check_source(source: str, write: Write = print) -> int:
    records = load_records(source)
    issues = validate_records(records)
    errors = [issue for issue in issues if issue.severity == "error"]
    for issue in issues:
        write(f"{issue.severity.upper()}: {issue.describe()}")
    if errors:
        return 1
    write("OK")
    return 0


def run_quiz(source: str, settings: Settings, *, read_line: ReadLine = input, write: Write = print) -> int:
    quiz = load_quiz(source)
    rng = make_rng(settings.seed)
    quiz = prepare_quiz(
        quiz,
        rng,
        shuffle_question_order=settings.shuffle_questions,
        shuffle_answer_order=settings.shuffle_answers,
    )
    QuizSession(quiz, read_line=read_line, write=write).run()
    return 0


def main(argv: list[str], *, read_line: ReadLine = input, write: Write = print) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except RuntimeError as exc:
        write(f"Error: {exc}")
        return 1
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.seed is not None:
        settings = replace(settings, seed=args.seed)
    if args.no_shuffle:
        settings = replace(settings, shuffle_questions=False, shuffle_answers=False)

    try:
        if args.check:
            return check_source(args.source, write=write)
        return run_quiz(args.source, settings, read_line=read_line, write=write)
    except QuizError as exc:
        logger.info("quiz_load_failed: %s", exc)
        write(str(exc))
        return 1
    except EOFError:
        write("Input closed before the quiz finished")
        return 1
    except KeyboardInterrupt:
        write("")
        return 130


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
