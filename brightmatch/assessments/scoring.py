"""IQ and EQ scorers."""

from __future__ import annotations

import math
from collections.abc import Sequence

from brightmatch.assessments.bands import (
    EQ_BANDS,
    EQ_CURVE,
    EQ_MAX_POINTS_PER_QUESTION,
    EQ_RANGE,
    IQ_BANDS,
    IQ_CURVE,
    IQ_RANGE,
    Band,
    CurveSegment,
    ScoreRange,
    band_for,
    segment_for,
)
from brightmatch.assessments.models import AnswerSequence, Question, TestKind, TestResult
from brightmatch.assessments.validation import (
    InvalidAnswersError,
    ensure_valid_answers,
)
from brightmatch.utils.logging import get_logger

logger = get_logger("assessments.scoring")

_BANDS: dict[TestKind, tuple[Band, ...]] = {
    TestKind.IQ: IQ_BANDS,
    TestKind.EQ: EQ_BANDS,
}

_RANGES: dict[TestKind, ScoreRange] = {
    TestKind.IQ: IQ_RANGE,
    TestKind.EQ: EQ_RANGE,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (92.5 -> 93).

    The score tables were calibrated against half-up rounding, so Python's
    round-half-to-even ``round()`` would shift some scores by one.
    """
    return math.floor(value + 0.5)


def map_ratio(ratio: float, curve: tuple[CurveSegment, ...]) -> float:
    """Map a 0..1 ratio through a piecewise-linear curve (unrounded)."""
    segment = segment_for(ratio, curve)
    return segment.base + (ratio - segment.start) * segment.slope


def _calibrate(ratio: float, curve: tuple[CurveSegment, ...], bounds: ScoreRange) -> int:
    score = round_half_up(map_ratio(ratio, curve))
    return max(bounds.minimum, min(bounds.maximum, score))


def percentile_for(score: int, kind: TestKind | str) -> int:
    """Approximate population percentile for a calibrated score."""
    return band_for(score, _BANDS[TestKind.parse(kind)]).percentile


def describe_score(score: int, kind: TestKind | str) -> str:
    """Short qualitative label for a calibrated score."""
    return band_for(score, _BANDS[TestKind.parse(kind)]).description


def interpret_score(score: int, kind: TestKind | str) -> str:
    """Long-form paragraph explaining a calibrated score to the user."""
    return band_for(score, _BANDS[TestKind.parse(kind)]).interpretation


def score_range(kind: TestKind | str) -> ScoreRange:
    """Closed range a calibrated score of this kind always falls in."""
    return _RANGES[TestKind.parse(kind)]


def result_for_score(score: int, kind: TestKind | str) -> TestResult:
    """Rebuild the display result for an already persisted score."""
    band = band_for(score, _BANDS[TestKind.parse(kind)])
    return TestResult(
        score=score, percentile=band.percentile, description=band.description
    )


def score_iq(answers: AnswerSequence, questions: Sequence[Question]) -> TestResult:
    """Score an IQ submission by its share of correct answers.

    No partial credit and no penalty for wrong answers; a submission with
    nothing correct still floors at 70.

    Raises:
        InvalidAnswersError: If the answers do not fit the catalog, or a
            question has no correct answer.
    """
    ensure_valid_answers(answers, questions)

    unkeyed = [q.id for q in questions if q.correct_answer_index is None]
    if unkeyed:
        raise InvalidAnswersError(
            [f"Question {qid} has no correct answer" for qid in unkeyed]
        )

    correct = sum(
        1
        for answer, question in zip(answers, questions)
        if answer == question.correct_answer_index
    )
    ratio = correct / len(questions)
    score = _calibrate(ratio, IQ_CURVE, IQ_RANGE)

    logger.debug(f"IQ scored: {correct}/{len(questions)} correct -> {score}")
    return result_for_score(score, TestKind.IQ)


def score_eq(answers: AnswerSequence, questions: Sequence[Question]) -> TestResult:
    """Score an EQ submission where each option is worth its own index.

    Raises:
        InvalidAnswersError: If the answers do not fit the catalog.
    """
    ensure_valid_answers(answers, questions)

    total = sum(answers)
    max_possible = EQ_MAX_POINTS_PER_QUESTION * len(questions)
    ratio = total / max_possible
    score = _calibrate(ratio, EQ_CURVE, EQ_RANGE)

    logger.debug(f"EQ scored: {total}/{max_possible} points -> {score}")
    return result_for_score(score, TestKind.EQ)
