"""IQ, EQ and personality-type assessments.

This module turns raw answer-index sequences into calibrated scores and a
four-letter personality code.

Public API:
    - validate_answers: Check an answer sequence against its catalog
    - score_iq / score_eq: Calibrated score, percentile and band label
    - classify_type: Four-letter personality code
    - interpret_score: Long-form explanation of a score
    - CatalogService: Load custom question catalogs
    - AssessmentConfig: Configuration settings
"""

from brightmatch.assessments.catalog import (
    EQ_QUESTIONS,
    IQ_QUESTIONS,
    SHORT_TYPE_QUESTIONS,
    TYPE_QUESTIONS,
    CatalogService,
    get_catalog,
)
from brightmatch.assessments.config import (
    AssessmentConfig,
    get_assessment_config,
    reset_assessment_config,
)
from brightmatch.assessments.models import (
    Dichotomy,
    Question,
    TestKind,
    TestResult,
    TypeProfile,
)
from brightmatch.assessments.personality import (
    TYPE_PROFILES,
    classify_type,
    describe_type,
    is_valid_type_code,
    normalize_type_code,
    tally_dichotomies,
)
from brightmatch.assessments.scoring import (
    describe_score,
    interpret_score,
    percentile_for,
    result_for_score,
    round_half_up,
    score_eq,
    score_iq,
)
from brightmatch.assessments.validation import (
    InvalidAnswersError,
    answer_errors,
    ensure_valid_answers,
    validate_answers,
)

__all__ = [
    "AssessmentConfig",
    "CatalogService",
    "Dichotomy",
    "EQ_QUESTIONS",
    "IQ_QUESTIONS",
    "InvalidAnswersError",
    "Question",
    "SHORT_TYPE_QUESTIONS",
    "TYPE_PROFILES",
    "TYPE_QUESTIONS",
    "TestKind",
    "TestResult",
    "TypeProfile",
    "answer_errors",
    "classify_type",
    "describe_score",
    "describe_type",
    "ensure_valid_answers",
    "get_assessment_config",
    "get_catalog",
    "interpret_score",
    "is_valid_type_code",
    "normalize_type_code",
    "percentile_for",
    "reset_assessment_config",
    "result_for_score",
    "round_half_up",
    "score_eq",
    "score_iq",
    "tally_dichotomies",
    "validate_answers",
]
