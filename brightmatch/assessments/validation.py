"""Answer sequence validation."""

from __future__ import annotations

from collections.abc import Sequence

from brightmatch.assessments.models import AnswerSequence, Question


class InvalidAnswersError(ValueError):
    """Raised when a scorer is handed a malformed answer sequence."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Invalid answers: " + "; ".join(errors))


def answer_errors(answers: AnswerSequence, questions: Sequence[Question]) -> list[str]:
    """Return the reasons an answer sequence is malformed (empty if valid)."""
    if len(answers) != len(questions):
        return [f"Expected {len(questions)} answers, got {len(answers)}"]

    errors: list[str] = []
    for position, (answer, question) in enumerate(zip(answers, questions)):
        if isinstance(answer, bool) or not isinstance(answer, int):
            errors.append(f"Answer {position} is not an integer: {answer!r}")
        elif not (0 <= answer < len(question.options)):
            errors.append(
                f"Answer {position} is out of range: {answer} "
                f"(question {question.id} has {len(question.options)} options)"
            )
    return errors


def validate_answers(answers: AnswerSequence, questions: Sequence[Question]) -> bool:
    """Return True when every answer is a valid option index for its question."""
    return not answer_errors(answers, questions)


def ensure_valid_answers(
    answers: AnswerSequence, questions: Sequence[Question]
) -> None:
    """Raise InvalidAnswersError unless the answers can be scored."""
    if not questions:
        raise InvalidAnswersError(["Question catalog is empty"])
    errors = answer_errors(answers, questions)
    if errors:
        raise InvalidAnswersError(errors)
